import pytest

from chromastyle.ansi import BasicPalette
from chromastyle.colors import RGBColor8
from chromastyle.styles import (
    Background,
    BackgroundPolicy,
    Category,
    Foreground,
    Style,
    merge,
)


def test_join_overrides_background():
    s1 = Style(background=Background.color256(5), foreground=[Foreground.color256(10)])
    s1.add(Style(background=Background.color256(20)))
    assert s1 == Style(background=Background.color256(20), foreground=[Foreground.color256(10)])


def test_join_overrides_foreground_color():
    s1 = Style(background=Background.color256(5), foreground=[Foreground.color256(10)])
    s1.add(Style(foreground=[Foreground.color256(20)]))
    assert s1 == Style(background=Background.color256(5), foreground=[Foreground.color256(20)])


def test_join_overrides_both_colors():
    s1 = Style(background=Background.color256(5), foreground=[Foreground.color256(10)])
    s1.add(Style(background=Background.color256(100), foreground=[Foreground.color256(20)]))
    assert s1 == Style(background=Background.color256(100), foreground=[Foreground.color256(20)])


def test_join_adds_non_color_foreground():
    s1 = Style(background=Background.color256(5), foreground=[Foreground.color256(10)])
    s1.add(Style(background=Background.NO_BACKGROUND, foreground=[Foreground.BOLD]))
    assert s1 == Style(
        background=Background.NO_BACKGROUND,
        foreground=[Foreground.color256(10), Foreground.BOLD],
    )


def test_adding_foreground_does_not_duplicate():
    s1 = Style(foreground=[Foreground.color256(10), Foreground.ITALIC])
    s1.add_foreground(Foreground.ITALIC)
    assert s1 == Style(foreground=[Foreground.color256(10), Foreground.ITALIC])


def test_new_color_replaces_old_and_keeps_other_attributes():
    s1 = Style(foreground=[Foreground.color256(10), Foreground.ITALIC, Foreground.UNDERLINE, Foreground.BOLD])
    s1.add_foreground(Foreground.basic(BasicPalette.GREEN))
    assert s1 == Style(
        foreground=[
            Foreground.ITALIC,
            Foreground.UNDERLINE,
            Foreground.BOLD,
            Foreground.basic(BasicPalette.GREEN),
        ]
    )


def test_overrides_append_in_category_order():
    style = Style(foreground=[Foreground.color256(1)])
    style.add_foregrounds([Foreground.UNDERLINE, Foreground.ITALIC, Foreground.color256(2), Foreground.BOLD])
    assert style.foreground == [
        Foreground.BOLD,
        Foreground.color256(2),
        Foreground.ITALIC,
        Foreground.UNDERLINE,
    ]


def test_last_attribute_of_a_category_wins():
    style = Style()
    style.add_foregrounds([Foreground.color256(1), Foreground.color256(2)])
    assert style.foreground == [Foreground.color256(2)]


def test_missing_background_keeps_existing_by_default():
    style = Style(background=Background.color256(5))
    style.add_background(None)
    assert style.background == Background.color256(5)


def test_overwrite_policy_clears_background():
    style = Style(background=Background.color256(5))
    style.add_background(None, BackgroundPolicy.OVERWRITE)
    assert style.background is None


def test_merge_with_overwrite_policy():
    base = Style(background=Background.color256(5), foreground=[Foreground.BOLD])
    merged = merge(base, Style(foreground=[Foreground.ITALIC]), BackgroundPolicy.OVERWRITE)
    assert merged == Style(foreground=[Foreground.BOLD, Foreground.ITALIC])


def test_merge_leaves_inputs_untouched():
    base = Style(background=Background.color256(5), foreground=[Foreground.color256(10)])
    incoming = Style(background=Background.color256(6), foreground=[Foreground.BOLD])
    merged = merge(base, incoming)

    assert merged == Style(
        background=Background.color256(6),
        foreground=[Foreground.color256(10), Foreground.BOLD],
    )
    assert base == Style(background=Background.color256(5), foreground=[Foreground.color256(10)])
    assert incoming.foreground == [Foreground.BOLD]


@pytest.mark.parametrize(
    "style",
    [
        Style(),
        Style(background=Background.color256(3)),
        Style(foreground=[Foreground.BOLD, Foreground.color256(9), Foreground.ITALIC]),
        Style(
            background=Background.rgb(RGBColor8(1, 2, 3)),
            foreground=[Foreground.BOLD, Foreground.rgb(RGBColor8(4, 5, 6)), Foreground.UNDERLINE],
        ),
    ],
)
def test_merge_with_itself_is_identity(style):
    assert merge(style, style) == style


def test_adding_returns_independent_copy():
    base = Style(foreground=[Foreground.BOLD])
    derived = base.adding_foreground(Foreground.ITALIC)

    assert base.foreground == [Foreground.BOLD]
    assert derived.foreground == [Foreground.BOLD, Foreground.ITALIC]

    derived.foreground.append(Foreground.UNDERLINE)
    assert base.foreground == [Foreground.BOLD]


def test_adding_background_twin():
    base = Style(background=Background.color256(1))
    derived = base.adding_background(Background.color256(2))
    assert base.background == Background.color256(1)
    assert derived.background == Background.color256(2)


def test_constructor_copies_foreground_list():
    foregrounds = [Foreground.BOLD]
    style = Style(foreground=foregrounds)
    foregrounds.append(Foreground.ITALIC)
    assert style.foreground == [Foreground.BOLD]


def test_copy_is_independent():
    style = Style(foreground=[Foreground.BOLD])
    copied = style.copy()
    copied.add_foreground(Foreground.ITALIC)
    assert style.foreground == [Foreground.BOLD]


def test_categories():
    assert Foreground.BOLD.category is Category.BOLD
    assert Foreground.basic_bright(BasicPalette.RED).category is Category.COLOR
    assert Foreground.color256(4).is_color
    assert not Foreground.UNDERLINE.is_color


def test_escape_lists_foreground_then_background():
    style = Style(
        background=Background.color256(20),
        foreground=[Foreground.ITALIC, Foreground.rgb(RGBColor8(255, 0, 0))],
    )
    assert style.escape == "\x1b[3;38;2;255;0;0;48;5;20m"


def test_no_background_emits_no_code():
    style = Style(background=Background.NO_BACKGROUND, foreground=[Foreground.BOLD])
    assert style.escape == "\x1b[1m"


def test_empty_style_escape():
    assert Style().escape == "\x1b[m"


def test_apply_wraps_text():
    style = Style(foreground=[Foreground.basic(BasicPalette.RED)])
    assert style.apply("hi") == "\x1b[31mhi\x1b[0m"


def test_background_variants():
    assert Background.basic(BasicPalette.CYAN).sgr.parameters() == (46,)
    assert Background.basic_bright(BasicPalette.CYAN).sgr.parameters() == (106,)
    assert Background.NO_BACKGROUND.sgr is None
