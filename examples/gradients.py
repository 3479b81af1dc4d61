"""Per-character gradient examples.

Run directly with:
    python examples/gradients.py
"""
from chromastyle import (
    HorizontalBackgroundStyler,
    HorizontalForegroundStyler,
    JoinedStyler,
    RGBColor8,
    VerticalForegroundStyler,
    apply_dual_gradient,
    create_gradient,
    write_output,
)

LINES = [
    f"{row}ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz    "
    for row in range(6)
]

BLUE_STOPS = [
    (0.0, RGBColor8(0x00, 0x00, 0x90)),
    (1.0, RGBColor8(0x00, 0x00, 0x40)),
]
WARM_STOPS = [
    (0.0, RGBColor8(0x90, 0x20, 0x30)),
    (0.3, RGBColor8(0xFF, 0x30, 0xA0)),
    (1.0, RGBColor8(0x10, 0x40, 0x60)),
]


def demonstrate_single_axis() -> None:
    horizontal = HorizontalForegroundStyler.from_stops(len(LINES[0]), BLUE_STOPS)
    write_output(horizontal.apply_lines(LINES))

    vertical = VerticalForegroundStyler.from_stops(len(LINES), BLUE_STOPS)
    write_output(vertical.apply_lines(LINES))


def demonstrate_joined() -> None:
    # Background follows the column, text color follows the row.
    background = HorizontalBackgroundStyler.from_stops(len(LINES[0]), WARM_STOPS)
    foreground = VerticalForegroundStyler.from_stops(len(LINES), BLUE_STOPS)
    write_output(JoinedStyler(background, foreground).apply_lines(LINES))


def demonstrate_dual() -> None:
    width = 40
    fg = create_gradient(width, [(0.0, RGBColor8(0xFF, 0xFF, 0xFF)), (1.0, RGBColor8(0xFF, 0xD0, 0x40))])
    bg = create_gradient(width, WARM_STOPS)
    write_output(apply_dual_gradient(" Title ", fg, bg, leading_filler="=", trailing_filler="=") + "\n")
    write_output(apply_dual_gradient("centered", fg, bg) + "\n")


if __name__ == "__main__":
    demonstrate_single_axis()
    demonstrate_joined()
    demonstrate_dual()
