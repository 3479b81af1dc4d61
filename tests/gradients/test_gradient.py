import warnings

import numpy as np
import pytest

from chromastyle.colors import HSLColor, RGBColor8
from chromastyle.exceptions import InvalidGradientInput
from chromastyle.gradients import Gradient, create_gradient

A = HSLColor(200.0, 0.4, 0.2)
B = HSLColor(200.0, 0.8, 0.7)


def test_gradient_boundary():
    gradient = create_gradient(5, [(0.0, A), (1.0, B)])

    assert len(gradient) == 5
    assert gradient[0] == A
    assert gradient[4] == B

    luminance = gradient.values[:, 2]
    saturation = gradient.values[:, 1]
    assert all(luminance[i] < luminance[i + 1] for i in range(4))
    assert all(saturation[i] < saturation[i + 1] for i in range(4))
    assert luminance[2] == pytest.approx(0.45)


def test_gradient_solid_edges():
    gradient = create_gradient(11, [(0.3, A), (0.7, B)])

    for i in range(0, 4):
        assert gradient[i] == A
    for i in range(7, 11):
        assert gradient[i] == B
    for i in range(4, 7):
        assert gradient[i] != A and gradient[i] != B


def test_gradient_solid_edges_short():
    gradient = create_gradient(4, [(0.3, A), (0.7, B)])
    assert gradient[0] == A
    assert gradient[3] == B


def test_stops_are_sorted():
    forward = create_gradient(6, [(0.0, A), (1.0, B)])
    backward = create_gradient(6, [(1.0, B), (0.0, A)])
    assert forward == backward


def test_duplicate_positions_later_stop_dominates_after_it():
    c = HSLColor(120.0, 0.2, 0.5)
    d = HSLColor(120.0, 0.6, 0.5)
    stops = [
        (0.0, HSLColor(120.0, 0.0, 0.5)),
        (0.5, HSLColor(120.0, 1.0, 0.5)),
        (0.5, c),
        (1.0, d),
    ]
    gradient = create_gradient(5, stops)

    assert gradient[3].saturation == pytest.approx(0.4)
    assert gradient[4] == d


def test_hue_goes_the_short_way():
    gradient = create_gradient(3, [(0.0, HSLColor(350.0, 1.0, 0.5)), (1.0, HSLColor(10.0, 1.0, 0.5))])
    assert gradient[1].hue == pytest.approx(0.0)


def test_length_one_uses_first_position():
    gradient = create_gradient(1, [(0.0, A), (1.0, B)])
    assert len(gradient) == 1
    assert gradient[0] == A


def test_single_stop_is_solid():
    gradient = create_gradient(4, [(0.5, A)])
    assert all(color == A for color in gradient)


@pytest.mark.parametrize("length", [0, -3])
def test_non_positive_length_fails(length):
    with pytest.raises(InvalidGradientInput):
        create_gradient(length, [(0.0, A)])


def test_empty_stops_fail():
    with pytest.raises(InvalidGradientInput):
        Gradient.from_stops(5, [])


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        create_gradient(0, [])


def test_out_of_range_positions_warn():
    with pytest.warns(UserWarning):
        gradient = create_gradient(3, [(-0.5, A), (1.5, B)])
    assert len(gradient) == 3


def test_in_range_positions_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        create_gradient(3, [(0.0, A), (1.0, B)])


def test_rgb_stops():
    red = RGBColor8(255, 0, 0)
    blue = RGBColor8(0, 0, 255)
    gradient = create_gradient(5, [(0.0, red), (1.0, blue)])

    points = gradient.rgb_points
    assert points[0] == red
    assert points[-1] == blue
    # red -> blue the short way passes through magenta
    assert points[2] == RGBColor8(255, 0, 255)


def test_rgb_points_match_scalar_conversion():
    gradient = create_gradient(
        32,
        [
            (0.0, RGBColor8(0x90, 0x20, 0x30)),
            (0.3, RGBColor8(0xFF, 0x30, 0xA0)),
            (1.0, RGBColor8(0x10, 0x40, 0x60)),
        ],
    )
    assert list(gradient.rgb_points) == [color.to_rgb() for color in gradient]


def test_gradient_is_read_only():
    gradient = create_gradient(3, [(0.0, A), (1.0, B)])
    with pytest.raises(ValueError):
        gradient.values[0, 0] = 1.0


def test_gradient_rejects_bad_shape():
    with pytest.raises(ValueError):
        Gradient(np.zeros((3, 2)))


def test_stop_color_type_checked():
    with pytest.raises(TypeError):
        create_gradient(3, [(0.0, (255, 0, 0))])
