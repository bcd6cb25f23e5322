import argparse
import math
import sys

import matplotlib.pyplot as plt

from pagestats import DEFAULT_RATES_FILE, REPORT_ORDER

DEFAULT_GRAPH_FILE = 'miss_rates.png'


def read_rates(filename):
    """
    Read a pagestats report: the first line holds the frame counts, each
    following line the miss rates of one algorithm in LRU, FIFO, OPT order.
    """
    with open(filename, 'r') as f:
        lines = [line.split() for line in f if line.strip()]

    if not lines:
        raise ValueError(f"{filename}: empty report")

    frames = [int(n) for n in lines[0]]
    rates = {}
    for (algorithm, _), row in zip(REPORT_ORDER, lines[1:]):
        if len(row) != len(frames):
            raise ValueError(
                f"{filename}: {algorithm} has {len(row)} rates for {len(frames)} frame counts")
        rates[algorithm] = [float(r) for r in row]
    return frames, rates


def plot_miss_rates(frames, rates, output=DEFAULT_GRAPH_FILE, show=False):
    fig, ax = plt.subplots(figsize=(8, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    markers = {'LRU': 'x', 'FIFO': 'o', 'OPT': 's'}
    for algorithm, values in rates.items():
        # Runs that never filled their frames have no miss rate
        points = [(n, r) for n, r in zip(frames, values) if not math.isnan(r)]
        ax.plot([n for n, _ in points], [r for _, r in points],
                label=algorithm, marker=markers.get(algorithm, '.'))

    ax.set_xlabel('Number of Frames')
    ax.set_ylabel('Miss Rate (%)')
    ax.set_xticks(frames)
    ax.grid(axis='y', alpha=0.3)
    ax.legend()

    plt.tight_layout()
    plt.savefig(output, dpi=300, bbox_inches='tight')
    print(f"\nGraph saved as '{output}'")
    if show:
        plt.show()
    plt.close(fig)
    return output


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='pagegraphs',
        description='Plot the miss rates of a pagestats report.')
    parser.add_argument('rates_file', nargs='?', default=DEFAULT_RATES_FILE)
    parser.add_argument('-o', '--output', default=DEFAULT_GRAPH_FILE)
    parser.add_argument('--show', action='store_true', help='also open the graph in a window')
    args = parser.parse_args(argv)

    try:
        frames, rates = read_rates(args.rates_file)
    except OSError as e:
        print(f"Error: cannot open file {args.rates_file} for reading ({e.strerror}).")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    plot_miss_rates(frames, rates, args.output, args.show)
    return 0


if __name__ == '__main__':
    sys.exit(main())
