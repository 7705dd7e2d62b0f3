import pytest

from display_ordered_map import build_random_tree, display_tree, main


@pytest.mark.parametrize("n_keys", [0, 1, 12, 100])
def test_build_random_tree(n_keys):
    tree = build_random_tree(n_keys, seed=7)

    assert tree.size() == n_keys
    if n_keys > 0:
        assert tree.min() == 1
        assert tree.max() == n_keys
        assert tree.median() == (n_keys + 1) // 2


def test_build_random_tree_is_seeded():
    a = build_random_tree(30, seed=1)
    b = build_random_tree(30, seed=1)
    assert a.pretty_print_keys() == b.pretty_print_keys()


def test_display_tree(capsys):
    tree = build_random_tree(5, seed=3)
    display_tree(tree)

    out = capsys.readouterr().out
    assert out == tree.print_keys_in_order() + "\n" + tree.pretty_print_keys()


def test_main(capsys):
    main(n_keys=9, seed=11)

    out = capsys.readouterr().out
    assert "After deleting multiples of 3:" in out
    assert "-null" in out
