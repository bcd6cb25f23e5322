import random

MAX_PAGE_RANGE = 100


def load_trace(filename):
    """
    Read a whitespace-separated sequence of page numbers.

    Raises ValueError on a token that is not a non-negative integer.
    """
    pages = []
    with open(filename, 'r') as f:
        for token in f.read().split():
            try:
                page = int(token)
            except ValueError:
                raise ValueError(
                    f"{filename}: reference {len(pages) + 1} is not a page number: {token!r}"
                ) from None
            if page < 0:
                raise ValueError(
                    f"{filename}: reference {len(pages) + 1} is negative: {page}"
                )
            pages.append(page)
    return pages


def generate_trace(page_range, count, seed=None, rng=None):
    """
    Generate count page numbers uniformly distributed in [0, page_range).
    No page number is ever equal to the one that precedes it.
    """
    if page_range < 2 or page_range > MAX_PAGE_RANGE:
        raise ValueError(f"Page range must be in [2, {MAX_PAGE_RANGE}], got {page_range}")
    if count < 1:
        raise ValueError(f"Count must be a positive integer, got {count}")

    if rng is None:
        rng = random.Random(seed)

    pages = []
    previous = 0
    for _ in range(count):
        current = rng.randrange(page_range)
        while current == previous:
            current = rng.randrange(page_range)
        previous = current
        pages.append(current)
    return pages


def write_trace(pages, filename):
    with open(filename, 'w') as f:
        for page in pages:
            f.write(f"{page} ")
