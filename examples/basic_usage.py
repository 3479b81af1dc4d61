"""Basic chromastyle usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromastyle import (
    Background,
    Foreground,
    RGBColor8,
    Style,
    print_styled,
    styled_output,
)


def demonstrate_styles() -> Style:
    # A style is applied to text and reset afterwards.
    style = Style(foreground=[Foreground.rgb(RGBColor8(0xFF, 0, 0))])
    print(style.apply("Hello, "), end="")
    print(style.adding_foregrounds([Foreground.BOLD, Foreground.ITALIC]).apply("world!"))

    # add_* changes the style in place.
    style.add_background(Background.rgb(RGBColor8(0x90, 0xB0, 0xFF)))
    print(style.apply("With background!"))
    return style


def demonstrate_builder(style: Style) -> None:
    # Nodes are flattened in order; nothing is merged between them.
    style_and_underline = styled_output(style, Foreground.UNDERLINE)
    print_styled(
        Foreground.rgb(RGBColor8(0x40, 0xD0, 0x90)),
        Foreground.BOLD,
        style_and_underline,
        "Builders, too",
    )


if __name__ == "__main__":
    demonstrate_builder(demonstrate_styles())
