import pytest

from dflatkit.htree import LEAF_COUNT, build_tree


def _counts(**by_byte):
    counts = [0] * LEAF_COUNT
    for key, value in by_byte.items():
        counts[ord(key)] = value
    return counts


def test_empty_counts_have_no_root():
    tree = build_tree([0] * LEAF_COUNT)
    assert tree.root == -1
    assert len(tree.nodes) == LEAF_COUNT


def test_single_symbol_is_root_with_empty_code():
    tree = build_tree(_counts(a=5))
    assert tree.root == ord("a")
    assert tree.code_for(ord("a")) == ()


def test_two_symbols_lower_count_goes_right():
    tree = build_tree(_counts(a=1, b=2))
    assert tree.root == LEAF_COUNT
    assert tree.nodes[tree.root].right == ord("a")
    assert tree.nodes[tree.root].left == ord("b")
    assert tree.code_for(ord("a")) == (0,)
    assert tree.code_for(ord("b")) == (1,)


def test_root_count_is_total_and_node_count():
    counts = _counts(a=7, b=3, c=3, d=1, e=12)
    tree = build_tree(counts)
    assert tree.nodes[tree.root].count == sum(counts)
    assert len(tree.nodes) == LEAF_COUNT + 5 - 1


def test_codes_are_prefix_free_and_complete():
    counts = _counts(a=7, b=3, c=3, d=1, e=12, f=2)
    tree = build_tree(counts)
    codes = [tree.code_for(i) for i, c in enumerate(counts) if c]
    for x in codes:
        for y in codes:
            if x is not y:
                assert x != y[: len(x)]
    assert sum(2.0 ** -len(code) for code in codes) == pytest.approx(1.0)


def test_frequent_symbol_not_longer():
    tree = build_tree(_counts(a=100, b=1, c=1, d=1))
    assert len(tree.code_for(ord("a"))) <= len(tree.code_for(ord("b")))


def test_code_for_absent_byte_raises():
    tree = build_tree(_counts(a=1, b=1))
    with pytest.raises(ValueError):
        tree.code_for(ord("z"))


def test_code_for_out_of_range_raises():
    tree = build_tree(_counts(a=1))
    with pytest.raises(ValueError):
        tree.code_for(300)


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2, 3])


def test_negative_count_raises():
    counts = [0] * LEAF_COUNT
    counts[1] = -1
    with pytest.raises(ValueError):
        build_tree(counts)