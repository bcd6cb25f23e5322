import math
import random

from page_trace import generate_trace
from reference_index import ReferenceIndex


def scan_distance(pages, page, position):
    for j in range(position, len(pages)):
        if pages[j] == page:
            return j - position
    return math.inf


def test_distance():
    pages = [3, 1, 3, 2]
    index = ReferenceIndex(pages)
    assert index.distance(3, 0) == 0
    assert index.distance(3, 1) == 1
    assert index.distance(3, 3) == math.inf
    assert index.distance(2, 0) == 3
    assert index.distance(9, 0) == math.inf
    assert index.get_entry(3).positions == [0, 2]


def test_distance_matches_forward_scan():
    rng = random.Random(7)
    pages = generate_trace(12, 200, rng=rng)
    index = ReferenceIndex(pages)
    for position in range(len(pages)):
        for page in range(12):
            assert index.distance(page, position) == scan_distance(pages, page, position)
