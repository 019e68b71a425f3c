from dataclasses import dataclass


class ConfigurationError(ValueError):
    pass


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class ComplexPlaneWindow:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        if not self.min_x < self.max_x:
            raise ConfigurationError(f"empty real range [{self.min_x}, {self.max_x}]")
        if not self.min_y < self.max_y:
            raise ConfigurationError(f"empty imaginary range [{self.min_y}, {self.max_y}]")


@dataclass(frozen=True)
class RenderConfig:
    """Everything a rank needs to compute its rows. Shared read-only."""
    width: int
    height: int
    max_iterations: int
    window: ComplexPlaneWindow

    def __post_init__(self):
        for name in ("width", "height", "max_iterations"):
            _require_int(name, getattr(self, name))
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"image size must be positive, got {self.width}x{self.height}")
        if self.max_iterations <= 0:
            raise ConfigurationError(f"max_iterations must be positive, got {self.max_iterations}")
        if not isinstance(self.window, ComplexPlaneWindow):
            raise ConfigurationError(f"window must be a ComplexPlaneWindow, got {self.window!r}")

    def plane_point(self, x: int, y: int) -> complex:
        w = self.window
        cr = w.min_x + (w.max_x - w.min_x) * x / self.width
        ci = w.min_y + (w.max_y - w.min_y) * y / self.height
        return complex(cr, ci)


REFERENCE_CONFIG = RenderConfig(
    width=800,
    height=800,
    max_iterations=1000,
    window=ComplexPlaneWindow(-2.0, 1.0, -1.5, 1.5),
)
