# topmark:header:start
#
#   project      : polyfmt
#   file         : test_tree_formatter.py
#   file_relpath : tests/formatters/test_tree_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree formatter rendering."""

from __future__ import annotations

from polyfmt.color import ColorMode
from polyfmt.formats import Format
from polyfmt.formatters.tree import BRANCH, FIRST_NODE, NODE, SPACER
from tests.conftest import make_formatter


def test_first_node_opens_the_tree() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.println("root")
    fmt.println("next")

    assert buffer.getvalue() == f"{FIRST_NODE} root\n{NODE} next\n"


def test_first_node_may_be_a_tagged_message() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.error("failed")
    fmt.success("recovered")

    assert buffer.getvalue() == "┌─ x failed\n├─ ✓ recovered\n"


def test_depth_lengthens_the_connector() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.println("root")
    with fmt.indent():
        fmt.println("child")
        with fmt.indent():
            fmt.println("grandchild")
    fmt.println("sibling")

    assert buffer.getvalue() == (
        "┌─ root\n"
        "├── child\n"
        "├─── grandchild\n"
        "├─ sibling\n"
    )


def test_continuation_lines_use_the_branch_aligned_under_the_text() -> None:
    fmt, buffer = make_formatter(Format.TREE, max_line_length=20)

    fmt.println("aaa bbb ccc ddd eee")

    assert buffer.getvalue() == "┌─ aaa bbb ccc ddd\n│  eee\n"


def test_continuation_alignment_follows_depth_and_glyph() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.println("root")
    with fmt.indent():
        fmt.warning("first\nsecond")

    # text starts after "├── !! ", i.e. at column 7
    assert buffer.getvalue().splitlines()[1:] == ["├── !! first", "│      second"]


def test_empty_println_draws_a_bare_branch() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.println("root")
    fmt.println()

    assert buffer.getvalue() == f"┌─ root\n{BRANCH}\n"


def test_bare_branch_does_not_open_the_tree() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.println()
    fmt.println("root")

    assert buffer.getvalue() == f"{BRANCH}\n┌─ root\n"


def test_padding_goes_before_the_graphics() -> None:
    fmt, buffer = make_formatter(Format.TREE, padding=2)

    fmt.println("root")
    fmt.spacer()

    assert buffer.getvalue() == f"  ┌─ root\n  {SPACER}\n"


def test_print_draws_a_branch_at_line_start() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.print("x")
    fmt.print("y")
    fmt.println("z")

    assert buffer.getvalue() == "│ xy\n┌─ z\n"


def test_spacer() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.spacer()

    assert buffer.getvalue() == f"{SPACER}\n"


def test_no_line_exceeds_the_maximum_length() -> None:
    fmt, buffer = make_formatter(Format.TREE, max_line_length=30, padding=1)

    with fmt.indent(), fmt.indent():
        fmt.success("pack my box with five dozen liquor jugs " * 4)

    assert all(len(line) <= 30 for line in buffer.getvalue().splitlines())


def test_table_header_is_a_node_and_rows_hang_off_the_branch() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    fmt.table(["a", "b"], [[1, 2], [3, 4]])

    assert buffer.getvalue() == (
        "┌─ a  b\n"
        "│  -  -\n"
        "│  1  2\n"
        "│  3  4\n"
    )


def test_graphics_are_colored_when_color_is_on() -> None:
    fmt, buffer = make_formatter(Format.TREE, color=ColorMode.ALWAYS)

    fmt.println("root")

    assert "\x1b[" in buffer.getvalue()
    assert "root" in buffer.getvalue()


def test_progress_renders_as_nodes() -> None:
    fmt, buffer = make_formatter(Format.TREE)

    with fmt.progress("Building") as handle:
        handle.update(0.5)

    assert buffer.getvalue() == "┌─ Building\n├─ ✓ Building\n"
