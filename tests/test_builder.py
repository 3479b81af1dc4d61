import io

import pytest

from chromastyle.ansi import Literal, SetGraphicsRendition, SGR
from chromastyle.builder import (
    BackgroundNode,
    EmptyNode,
    ForegroundNode,
    GroupNode,
    StyleNode,
    TextNode,
    flatten,
    group,
    print_styled,
    render,
    styled_output,
    text,
    with_background,
    with_foreground,
    with_style,
    write_styled,
)
from chromastyle.colors import RGBColor8
from chromastyle.styles import Background, Foreground, Style


def test_text_renders_as_is():
    assert render("plain") == "plain"
    assert render(text("plain")) == "plain"


def test_items_render_in_order():
    out = render(Foreground.BOLD, "a", Background.color256(3), "b")
    assert out == "\x1b[1ma\x1b[48;5;3mb"


def test_foreground_list_is_one_sequence():
    out = render([Foreground.BOLD, Foreground.ITALIC], "x")
    assert out == "\x1b[1;3mx"
    assert render(with_foreground(Foreground.BOLD, Foreground.ITALIC), "x") == out


def test_empty_nodes_emit_nothing():
    assert render() == ""
    assert render(None, "x", None) == "x"
    assert render(with_background(None), "x") == "x"
    assert render(Background.NO_BACKGROUND, "x") == "x"
    assert flatten(EmptyNode()) == []


def test_flatten_is_depth_first():
    tree = group("a", group(Foreground.BOLD, "b"), "c")
    assert flatten(tree) == [
        Literal("a"),
        SetGraphicsRendition([SGR.BOLD]),
        Literal("b"),
        Literal("c"),
    ]


def test_nested_lists_become_groups():
    node = styled_output(["a", ["b", "c"]])
    assert isinstance(node, GroupNode)
    assert render(node) == "abc"


def test_style_node_is_detached():
    style = Style(foreground=[Foreground.BOLD])
    node = with_style(style)
    style.add_foreground(Foreground.ITALIC)
    assert render(node) == "\x1b[1m"


def test_style_and_foreground_are_not_merged():
    style = Style(foreground=[Foreground.rgb(RGBColor8(255, 0, 0))])
    out = render(style, Foreground.UNDERLINE, "u")
    assert out == "\x1b[38;2;255;0;0m\x1b[4mu"


def test_node_types():
    assert isinstance(styled_output("x"), TextNode)
    assert isinstance(styled_output(Foreground.BOLD), ForegroundNode)
    assert isinstance(styled_output(Background.color256(1)), BackgroundNode)
    assert isinstance(styled_output(Style()), StyleNode)
    assert isinstance(styled_output(None), EmptyNode)
    assert isinstance(styled_output(), EmptyNode)
    assert isinstance(styled_output("a", "b"), GroupNode)


def test_nodes_pass_through():
    node = text("x")
    assert styled_output(node) is node


def test_unsupported_item():
    with pytest.raises(TypeError):
        styled_output(42)


def test_builder_composition():
    style = Style(foreground=[Foreground.rgb(RGBColor8(0xFF, 0, 0))])
    style.add_background(Background.rgb(RGBColor8(0x90, 0xB0, 0xFF)))
    style_and_underline = styled_output(style, Foreground.UNDERLINE)

    out = render(
        Foreground.rgb(RGBColor8(0x40, 0xD0, 0x90)),
        Foreground.BOLD,
        style_and_underline,
        "Builders, too",
    )
    assert out == (
        "\x1b[38;2;64;208;144m"
        "\x1b[1m"
        "\x1b[38;2;255;0;0;48;2;144;176;255m"
        "\x1b[4m"
        "Builders, too"
    )


def test_print_styled_adds_newline():
    stream = io.StringIO()
    print_styled(Foreground.BOLD, "hi", file=stream)
    assert stream.getvalue() == "\x1b[1mhi\n"


def test_write_styled_to_path(tmp_path):
    target = tmp_path / "styled.txt"
    write_styled(target, Foreground.ITALIC, "it")
    assert target.read_text(encoding="utf-8") == "\x1b[3mit"
