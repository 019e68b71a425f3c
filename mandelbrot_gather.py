import numpy as np
from mpi4py import MPI

from mandelbrot_config import RenderConfig
from mandelbrot_partition import WorkerAssignment, partition_rows

CHANNELS = 3


class GatherError(RuntimeError):
    pass


def _local_problem(config: RenderConfig, assignment: WorkerAssignment, local: np.ndarray) -> str | None:
    expected = (assignment.row_count, config.width, CHANNELS)
    if local.dtype != np.uint8:
        return f"worker {assignment.worker_index}: buffer dtype {local.dtype}, expected uint8"
    if local.shape != expected:
        return f"worker {assignment.worker_index}: buffer shape {local.shape}, expected {expected}"
    return None


def _coverage_problem(config: RenderConfig, assignments: list[WorkerAssignment]) -> str | None:
    next_row = 0
    for position, a in enumerate(assignments):
        if a.worker_index != position:
            return f"contribution {position} reported worker index {a.worker_index}"
        if a.start_row != next_row or a.end_row < a.start_row:
            return f"worker {position} covers rows [{a.start_row}, {a.end_row}), expected a range starting at {next_row}"
        next_row = a.end_row
    if next_row != config.height:
        return f"contributions cover rows [0, {next_row}) of {config.height}"
    return None


def gatherv_layout(assignments: list[WorkerAssignment], width: int) -> tuple[np.ndarray, np.ndarray]:
    """Per-worker byte counts and displacements into the final buffer."""
    sendcounts = np.array([a.row_count for a in assignments], dtype=np.int64) * width * CHANNELS
    displs = np.insert(np.cumsum(sendcounts[:-1]), 0, 0)
    return sendcounts, displs


def assemble(config: RenderConfig, pieces: list[tuple[WorkerAssignment, np.ndarray]]) -> np.ndarray:
    for assignment, local in pieces:
        problem = _local_problem(config, assignment, local)
        if problem:
            raise GatherError(problem)
    problem = _coverage_problem(config, [a for a, _ in pieces])
    if problem:
        raise GatherError(problem)

    final = np.empty((config.height, config.width, CHANNELS), dtype=np.uint8)
    for assignment, local in pieces:
        final[assignment.start_row:assignment.end_row] = local
    return final


def gather_image(comm, config: RenderConfig, assignment: WorkerAssignment,
                 local: np.ndarray, root: int = 0) -> np.ndarray | None:
    """Collective: every rank of comm must call it.

    Rows are collected with Gatherv sized by each worker's own row count, so
    the last worker's remainder rows land where they belong. Root returns the
    full (height, width, 3) buffer, the other ranks return None. A wrong
    buffer shape or row ranges other than the block split raise GatherError
    on every rank.
    """
    rank = comm.Get_rank()
    report = (assignment.worker_index, assignment.start_row, assignment.end_row,
              _local_problem(config, assignment, local))
    reports = comm.gather(report, root=root)

    problem = None
    if rank == root:
        assignments = [WorkerAssignment(i, start, end) for i, start, end, _ in reports]
        problem = next((p for *_, p in reports if p), None) or _coverage_problem(config, assignments)
        if not problem and assignments != partition_rows(config.height, comm.Get_size()):
            problem = f"reported row ranges {[(a.start_row, a.end_row) for a in assignments]} differ from the block split"
    problem = comm.bcast(problem, root=root)
    if problem:
        raise GatherError(problem)

    if rank == root:
        sendcounts, displs = gatherv_layout(assignments, config.width)
        final = np.empty((config.height, config.width, CHANNELS), dtype=np.uint8)
        recvbuf = [final, (sendcounts, displs), MPI.UNSIGNED_CHAR]
    else:
        final = None
        recvbuf = None

    comm.Gatherv(sendbuf=[np.ascontiguousarray(local), MPI.UNSIGNED_CHAR], recvbuf=recvbuf, root=root)
    return final
