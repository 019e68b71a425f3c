import numpy as np
from PIL import Image
import matplotlib.pyplot as plt


def to_image(buffer: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))


def save_image(buffer: np.ndarray, path) -> None:
    to_image(buffer).save(path, format="PNG")


def show_image(buffer: np.ndarray, title: str = "Unique Mandelbrot Fractal") -> None:
    fig, ax = plt.subplots()
    fig.canvas.manager.set_window_title(title)
    ax.imshow(buffer, interpolation="nearest")
    ax.set_axis_off()
    plt.show()
