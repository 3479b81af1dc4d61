import re

import pytest

# 8-bit RGB -> (hue, saturation, luminance)
SAMPLES_RGB_HSL = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 128, 0): (60 * 128 / 255, 1.0, 0.5),
    (128, 0, 0): (0.0, 1.0, 64 / 255),
}

SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_sgr(text: str) -> str:
    """Remove every SGR sequence, leaving the visible characters."""
    return SGR_PATTERN.sub("", text)


@pytest.fixture
def samples_rgb_hsl():
    return SAMPLES_RGB_HSL


@pytest.fixture
def visible():
    return strip_sgr
