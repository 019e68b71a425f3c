import pytest

from mandelbrot_config import ComplexPlaneWindow, RenderConfig, ConfigurationError, REFERENCE_CONFIG

WINDOW = ComplexPlaneWindow(-2.0, 1.0, -1.5, 1.5)


def test_reference_config():
    assert (REFERENCE_CONFIG.width, REFERENCE_CONFIG.height) == (800, 800)
    assert REFERENCE_CONFIG.max_iterations == 1000
    assert REFERENCE_CONFIG.window == WINDOW


@pytest.mark.parametrize("bounds", [(1.0, 1.0, 0.0, 1.0), (0.0, 1.0, 2.0, -2.0)])
def test_empty_window_rejected(bounds):
    with pytest.raises(ConfigurationError):
        ComplexPlaneWindow(*bounds)


@pytest.mark.parametrize("width, height, max_iterations", [
    (0, 10, 10), (10, -1, 10), (10, 10, 0), (10, 10, -5), (10.0, 10, 10), (True, 10, 10),
])
def test_bad_config_rejected(width, height, max_iterations):
    with pytest.raises(ConfigurationError):
        RenderConfig(width, height, max_iterations, WINDOW)


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        REFERENCE_CONFIG.width = 10


def test_plane_point_corners():
    config = RenderConfig(4, 2, 10, WINDOW)
    assert config.plane_point(0, 0) == complex(-2.0, -1.5)
    assert config.plane_point(2, 1) == complex(-0.5, 0.0)
