"""
pagestats runs every page replacement algorithm over a range of frame
counts on one page reference file. For each algorithm and frame count it
prints the miss rate and appends it to a report file whose first line is
the sequence of frame counts used.

    pagestats min_frames max_frames frame_inc file [-o pagerates.txt]
"""
import argparse
import sys

from page_trace import load_trace
from simulator import run_policy

MIN_STATS_FRAMES = 2
MAX_STATS_FRAMES = 100
DEFAULT_RATES_FILE = 'pagerates.txt'

# Report order, with the label printed for each
REPORT_ORDER = [('LRU', 'LRU'), ('FIFO', 'FIFO'), ('OPT', 'EXTRA')]


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pagestats',
        description='Compare miss rates of the page replacement algorithms over a range of frame counts.')
    parser.add_argument('min_frames', type=int,
                        help=f'minimum number of frames (no less than {MIN_STATS_FRAMES})')
    parser.add_argument('max_frames', type=int,
                        help=f'maximum number of frames (no more than {MAX_STATS_FRAMES})')
    parser.add_argument('frame_inc', type=int, help='frame number increment (positive integer)')
    parser.add_argument('file', help='file containing the page references')
    parser.add_argument('-o', '--output', default=DEFAULT_RATES_FILE,
                        help=f'report file to write (default: {DEFAULT_RATES_FILE})')
    return parser


def verify_input(min_frames, max_frames, frame_inc):
    if min_frames < MIN_STATS_FRAMES:
        raise ValueError(
            f"minimum number of frames can be no less than {MIN_STATS_FRAMES}; received {min_frames}")
    if max_frames > MAX_STATS_FRAMES:
        raise ValueError(
            f"maximum number of frames can be no more than {MAX_STATS_FRAMES}; received {max_frames}")
    if min_frames > max_frames:
        raise ValueError("minimum number of frames cannot be more than maximum number of frames")
    if frame_inc < 1:
        raise ValueError(f"frame number increment must be a positive integer; received {frame_inc}")


def frame_sweep(min_frames, max_frames, frame_inc):
    return list(range(min_frames, max_frames + 1, frame_inc))


def print_results(label, num_frames, stats, target):
    print(f"{label}, {num_frames:3d} frames: Miss Rate = "
          f"{stats.faults:3d} / {stats.references:3d} = {stats.miss_rate:3.2f}%")
    target.write(f"{stats.miss_rate:3.2f} ")


def run_stats(pages, sweep, target):
    """Run every algorithm for every frame count in the sweep, writing the report to target."""
    results = {}

    target.write(' '.join(str(n) for n in sweep) + ' \n')
    for algorithm, label in REPORT_ORDER:
        results[algorithm] = []
        for num_frames in sweep:
            stats = run_policy(algorithm, pages, num_frames)
            results[algorithm].append(stats)
            print_results(label, num_frames, stats, target)
        print()
        target.write('\n')

    return results


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        verify_input(args.min_frames, args.max_frames, args.frame_inc)
        pages = load_trace(args.file)
    except OSError as e:
        print(f"Error: cannot open file {args.file} for reading ({e.strerror}).")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not pages:
        print(f"Error: {args.file}: no page references found")
        return 1

    try:
        with open(args.output, 'w') as target:
            run_stats(pages, frame_sweep(args.min_frames, args.max_frames, args.frame_inc), target)
    except OSError as e:
        print(f"Error: cannot open file {args.output} for writing ({e.strerror}).")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
