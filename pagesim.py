"""
pagesim reads a sequence of page references from a file and simulates one
page replacement algorithm on it, printing the frames after every reference
and then the miss rate.

    pagesim num_memory_frames file algo
"""
import argparse
import sys

from simulator import PageReplacementSimulator

MIN_MEMORY_FRAMES = 1
MAX_MEMORY_FRAMES = 100


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pagesim',
        description='Simulate a page replacement algorithm on a page reference file.')
    parser.add_argument('num_memory_frames', type=int,
                        help=f'total number of physical memory frames (maximum {MAX_MEMORY_FRAMES})')
    parser.add_argument('file', help='file containing the page references')
    parser.add_argument('algo', type=str.lower, choices=['fifo', 'lru', 'opt', 'extra'],
                        help='replacement algorithm (extra is the optimal policy)')
    return parser


def verify_input(num_memory_frames):
    if num_memory_frames < MIN_MEMORY_FRAMES or num_memory_frames > MAX_MEMORY_FRAMES:
        raise ValueError(
            f"range of number of memory frames is [{MIN_MEMORY_FRAMES}, {MAX_MEMORY_FRAMES}], "
            f"received {num_memory_frames}.")


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        verify_input(args.num_memory_frames)
        simulator = PageReplacementSimulator(
            algorithm=args.algo, num_frames=args.num_memory_frames, verbose=True)
        simulator.run_simulation(args.file)
    except OSError as e:
        print(f"Error: cannot open file {args.file} for reading ({e.strerror}).")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
