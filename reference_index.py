import math
from bisect import bisect_left


class PageReferences:
    def __init__(self, page_num):
        self.page_num = page_num
        self.positions = []  # Trace positions, ascending

    def next_use(self, position):
        """First position at or after the given one, or None if never used again."""
        i = bisect_left(self.positions, position)
        if i == len(self.positions):
            return None
        return self.positions[i]


class ReferenceIndex:
    """
    Maps every page in a trace to the positions it is referenced at, so the
    optimal policy can look ahead without rescanning the rest of the trace.
    """

    def __init__(self, pages):
        self.entries = {}  # page_num -> PageReferences
        for position, page in enumerate(pages):
            if page not in self.entries:
                self.entries[page] = PageReferences(page)
            self.entries[page].positions.append(position)

    def get_entry(self, page_num):
        return self.entries.get(page_num)

    def distance(self, page_num, position):
        entry = self.get_entry(page_num)
        if entry is None:
            return math.inf
        next_ref = entry.next_use(position)
        if next_ref is None:
            return math.inf
        return next_ref - position
