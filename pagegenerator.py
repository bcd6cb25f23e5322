"""
pagegenerator writes a sequence of random page numbers, uniformly
distributed between 0 and range minus 1, in which no page number is equal
to the one before it.

    pagegenerator range count file [seed]
"""
import argparse
import sys

from page_trace import MAX_PAGE_RANGE, generate_trace, write_trace


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pagegenerator',
        description='Generate a random page reference file.')
    parser.add_argument('range', type=int,
                        help=f'range of page references (maximum {MAX_PAGE_RANGE})')
    parser.add_argument('count', type=int, help='length of the sequence to generate')
    parser.add_argument('file', help='name of the output file')
    parser.add_argument('seed', type=int, nargs='?', default=None,
                        help='seed for the random number generator')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        pages = generate_trace(args.range, args.count, seed=args.seed)
        write_trace(pages, args.file)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"Error: cannot create file {args.file} ({e.strerror}).")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
