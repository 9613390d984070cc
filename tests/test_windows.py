import pytest

from dflatkit.windows import Rect, Window, set_next_focus, set_prev_focus


def make_app():
    app = Window(Rect(0, 0, 79, 24), window_class="APPLICATION", has_border=True)
    return app


def test_rect_intersect_and_contains():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 20, 20)
    assert a.intersect(b) == Rect(5, 5, 10, 10)
    assert a.intersect(Rect(11, 11, 12, 12)) is None
    assert a.contains(10, 10)
    assert not a.contains(11, 0)


def test_rect_dimensions_and_translate():
    r = Rect(2, 3, 11, 7)
    assert (r.width, r.height) == (10, 5)
    assert r.translated(1, -1) == Rect(3, 2, 12, 6)


def test_construction_appends_in_order():
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    b = Window(Rect(1, 1, 5, 5), parent=app)
    assert app.children == [a, b]
    assert a.next_sibling is b
    assert b.prev_sibling is a
    assert app.first_child is a and app.last_child is b


def test_append_moves_to_end():
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    b = Window(Rect(1, 1, 5, 5), parent=app)
    a.append()
    assert app.children == [b, a]


def test_remove_keeps_parent_link():
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    a.remove()
    assert app.children == []
    assert a.parent is app
    a.remove()
    assert app.children == []


def test_refocus_moves_ancestors_to_end():
    app = make_app()
    doc1 = Window(Rect(1, 1, 30, 10), parent=app)
    doc2 = Window(Rect(1, 1, 30, 10), parent=app)
    c1 = Window(Rect(2, 2, 5, 5), parent=doc1)
    c2 = Window(Rect(2, 2, 5, 5), parent=doc1)
    c1.refocus()
    assert doc1.children == [c2, c1]
    assert app.children == [doc2, doc1]


def test_is_ancestor():
    app = make_app()
    doc = Window(Rect(1, 1, 30, 10), parent=app)
    child = Window(Rect(2, 2, 5, 5), parent=doc)
    other = Window(Rect(2, 2, 5, 5), parent=app)
    assert child.is_ancestor(app)
    assert child.is_ancestor(child)
    assert not child.is_ancestor(other)
    assert not app.is_ancestor(child)


def test_is_visible_follows_parents():
    app = make_app()
    doc = Window(Rect(1, 1, 30, 10), parent=app)
    child = Window(Rect(2, 2, 5, 5), parent=doc)
    assert child.is_visible()
    doc.hidden = True
    assert not child.is_visible()
    assert app.is_visible()


def test_get_ancestor_stops_below_application():
    app = make_app()
    doc = Window(Rect(1, 1, 30, 10), parent=app)
    child = Window(Rect(2, 2, 5, 5), parent=doc)
    grand = Window(Rect(3, 3, 4, 4), parent=child)
    assert grand.get_ancestor() is doc
    assert doc.get_ancestor() is doc
    assert app.get_ancestor() is app


def test_client_rect_with_border():
    w = Window(Rect(0, 0, 9, 9), has_border=True)
    assert w.client_rect == Rect(1, 1, 8, 8)
    plain = Window(Rect(0, 0, 9, 9))
    assert plain.client_rect == plain.rect


def test_inside_clipped_by_parent_client():
    app = make_app()
    doc = Window(Rect(0, 0, 10, 10), parent=app, has_border=True)
    child = Window(Rect(5, 5, 20, 20), parent=doc)
    assert child.inside(6, 6)
    assert not child.inside(10, 10)
    assert not child.inside(15, 15)
    child.noclip = True
    assert child.inside(15, 15)


def test_next_focus_skips_bars_and_hidden():
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    bar = Window(Rect(0, 0, 79, 0), window_class="MENUBAR", parent=app)
    hidden = Window(Rect(1, 1, 5, 5), parent=app, hidden=True)
    b = Window(Rect(1, 1, 5, 5), parent=app)
    assert set_next_focus(a) is b
    assert set_next_focus(b) is a
    assert bar.window_class == "MENUBAR" and hidden.hidden


def test_prev_focus_does_not_skip_menubar():
    app = make_app()
    bar = Window(Rect(0, 0, 79, 0), window_class="MENUBAR", parent=app)
    status = Window(Rect(0, 24, 79, 24), window_class="STATUSBAR", parent=app)
    a = Window(Rect(1, 1, 5, 5), parent=app)
    assert set_prev_focus(a) is bar
    assert status in app.children


def test_focus_falls_back_to_parent():
    app = make_app()
    only = Window(Rect(1, 1, 5, 5), parent=app)
    assert set_next_focus(only) is app
    assert set_prev_focus(only) is app


def test_focus_none_and_top_level():
    assert set_next_focus(None) is None
    app = make_app()
    assert set_next_focus(app) is None
    assert set_prev_focus(app) is None


def test_focus_follows_childfocus():
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    b = Window(Rect(1, 1, 30, 10), parent=app)
    inner = Window(Rect(2, 2, 4, 4), parent=b)
    b.childfocus = inner
    assert set_next_focus(a) is inner


def test_closing_target_gives_none():
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    b = Window(Rect(1, 1, 5, 5), parent=app, closing=True)
    assert set_next_focus(a) is None
    assert b.closing


@pytest.mark.parametrize("func", [set_next_focus, set_prev_focus])
def test_all_siblings_hidden_returns_parent(func):
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    Window(Rect(1, 1, 5, 5), parent=app, hidden=True)
    Window(Rect(1, 1, 5, 5), parent=app, hidden=True)
    assert func(a) is app


def test_removed_focus_does_not_loop():
    app = make_app()
    a = Window(Rect(1, 1, 5, 5), parent=app)
    Window(Rect(1, 1, 5, 5), parent=app, hidden=True)
    a.remove()
    assert set_next_focus(a) is app