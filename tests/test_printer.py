import io

from bintree.node import Node
from bintree.printer import print_tree, render


def _three():
    root = Node(98)
    root.left = Node(12, parent=root)
    root.right = Node(402, parent=root)
    return root


def test_render_single_node():
    assert render(Node(98)) == "(098)\n"


def test_render_empty_tree():
    assert render(None) == ""


def test_render_three_nodes():
    assert render(_three()) == "  .--(098)--.\n(012)     (402)\n"


def test_one_line_per_level():
    root = _three()
    root.left.insert_left(6).insert_right(7)
    lines = render(root).splitlines()
    assert len(lines) == 4


def test_every_value_is_drawn():
    root = _three()
    root.right.insert_left(256)
    root.right.insert_right(512)
    out = render(root)
    for value in (98, 12, 402, 256, 512):
        assert f"({value:03d})" in out


def test_no_trailing_spaces():
    root = _three()
    root.left.insert_right(54)
    for line in render(root).splitlines():
        assert line == line.rstrip(" ")


def test_print_tree_writes_render():
    root = _three()
    buf = io.StringIO()
    print_tree(root, buf)
    assert buf.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(Node(5))
    assert capsys.readouterr().out == "(005)\n"