"""Run under mpiexec: each rank renders its block and joins gather_image.

Usage: gather_ranks.py {exact|short|shifted}
"""
import sys

import numpy as np
from mpi4py import MPI

from mandelbrot_config import ComplexPlaneWindow, RenderConfig
from mandelbrot_partition import WorkerAssignment, assignment_for
from mandelbrot_worker import render_rows, render_image
from mandelbrot_gather import GatherError, gather_image

CONFIG = RenderConfig(20, 10, 80, ComplexPlaneWindow(-2.0, 1.0, -1.5, 1.5))

comm = MPI.COMM_WORLD
rank = comm.Get_rank()
size = comm.Get_size()
mode = sys.argv[1]

assignment = assignment_for(CONFIG.height, size, rank)
if mode == "shifted":
    # contiguous and complete, but not the block split
    start = 0 if rank == 0 else assignment.start_row + 1
    end = CONFIG.height if rank == size - 1 else assignment.end_row + 1
    assignment = WorkerAssignment(rank, start, end)
local = render_rows(CONFIG, assignment)
if mode == "short" and rank == 1:
    local = local[:-1]

try:
    final = gather_image(comm, CONFIG, assignment, local)
except GatherError as exc:
    print(f"rank {rank} GatherError {exc}", flush=True)
else:
    if final is None:
        print(f"rank {rank} None", flush=True)
    else:
        print(f"rank {rank} EQUAL {np.array_equal(final, render_image(CONFIG))}", flush=True)
