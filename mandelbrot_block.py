#!/usr/bin/env python3
import argparse
import sys
import traceback

from mpi4py import MPI

from mandelbrot_config import REFERENCE_CONFIG, ConfigurationError
from mandelbrot_partition import assignment_for
from mandelbrot_worker import render_rows
from mandelbrot_gather import gather_image
from mandelbrot_display import save_image, show_image


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Block-row MPI Mandelbrot renderer")
    parser.add_argument("--output", default="mandelbrot_block.png")
    parser.add_argument("--no-save", action="store_true", help="do not write the PNG")
    parser.add_argument("--show", action="store_true", help="display the image and wait for the window to close")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()
    size = comm.Get_size()
    config = REFERENCE_CONFIG

    try:
        assignment = assignment_for(config.height, size, rank)
    except ConfigurationError as exc:
        print(f"[Block] rank {rank}: configuration error: {exc}", file=sys.stderr, flush=True)
        return 2

    if rank == 0:
        print(f"[Block] {size} processes, {config.width}x{config.height}, "
              f"max_iterations={config.max_iterations}", flush=True)

    try:
        t_deb = MPI.Wtime()
        local = render_rows(config, assignment)
        local_time = MPI.Wtime() - t_deb

        t_gather = MPI.Wtime()
        image = gather_image(comm, config, assignment, local)
        gather_time = MPI.Wtime() - t_gather
        times = comm.gather(local_time, root=0)
    except Exception:
        print(f"[Block] rank {rank}: render failed", file=sys.stderr, flush=True)
        traceback.print_exc()
        sys.stderr.flush()
        comm.Abort(1)
        return 1

    if rank == 0:
        print(f"[Block] calcul par {size} processus = {max(times):.4f} s", flush=True)
        print(f"[Block] assemblage de l'image: {gather_time:.4f} s", flush=True)
        if not args.no_save:
            t_img_deb = MPI.Wtime()
            save_image(image, args.output)
            print(f"[Block] ecriture de {args.output}: {MPI.Wtime() - t_img_deb:.4f} s", flush=True)
        if args.show:
            show_image(image)
    return 0


if __name__ == "__main__":
    sys.exit(main())
