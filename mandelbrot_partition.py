from dataclasses import dataclass

from mandelbrot_config import ConfigurationError


@dataclass(frozen=True)
class WorkerAssignment:
    worker_index: int
    start_row: int
    end_row: int

    @property
    def row_count(self) -> int:
        return self.end_row - self.start_row

    @property
    def rows(self) -> range:
        return range(self.start_row, self.end_row)


def partition_rows(height: int, workers: int) -> list[WorkerAssignment]:
    if workers < 1:
        raise ConfigurationError(f"need at least one worker, got {workers}")
    if height < 1:
        raise ConfigurationError(f"need at least one row, got {height}")

    rows_per_worker = height // workers
    assignments = []
    for i in range(workers):
        start = i * rows_per_worker
        # the last worker takes the height % workers leftover rows
        end = height if i == workers - 1 else start + rows_per_worker
        assignments.append(WorkerAssignment(i, start, end))
    return assignments


def assignment_for(height: int, workers: int, rank: int) -> WorkerAssignment:
    if not 0 <= rank < workers:
        raise ConfigurationError(f"rank {rank} outside a group of {workers}")
    return partition_rows(height, workers)[rank]
