import numpy as np

from mandelbrot import iterate, color_of
from mandelbrot_config import RenderConfig
from mandelbrot_partition import WorkerAssignment


def render_rows(config: RenderConfig, assignment: WorkerAssignment) -> np.ndarray:
    max_iterations = config.max_iterations
    local = np.empty((assignment.row_count, config.width, 3), dtype=np.uint8)
    for j_local, y in enumerate(assignment.rows):
        for x in range(config.width):
            n = iterate(config.plane_point(x, y), max_iterations)
            local[j_local, x] = color_of(n, max_iterations)
    return local


def render_image(config: RenderConfig) -> np.ndarray:
    return render_rows(config, WorkerAssignment(0, 0, config.height))
