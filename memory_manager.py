import math


def locate(frames, page):
    """Return the slot holding page, or None if it is not resident."""
    for i, resident in enumerate(frames):
        if resident == page:
            return i
    return None


def age_all(ages):
    for i in range(len(ages)):
        ages[i] += 1


def slot_with_max(values):
    """Index of the largest value; the first one wins on ties."""
    max_index = 0
    for i in range(1, len(values)):
        if values[i] > values[max_index]:
            max_index = i
    return max_index


class FrameTable:
    def __init__(self, num_frames):
        if num_frames < 1:
            raise ValueError(f"Number of frames must be positive, got {num_frames}")
        self.num_frames = num_frames
        # Each slot stores a page number or None if free
        self.frames = [None] * num_frames
        # Every miss allocates, including the ones that evict
        self.num_allocated = 0

    def locate(self, page):
        return locate(self.frames, page)

    def free_slot(self):
        for i, page in enumerate(self.frames):
            if page is None:
                return i
        return None

    def load(self, slot, page):
        self.frames[slot] = page
        self.num_allocated += 1

    def is_filled(self):
        return self.num_allocated >= self.num_frames

    def snapshot(self):
        return tuple(self.frames)


class Statistics:
    def __init__(self):
        # Only counted once the frame table has been filled
        self.faults = 0
        self.references = 0
        self.warmup_faults = 0

    def record_reference(self, filled):
        if filled:
            self.references += 1

    def record_page_fault(self, filled):
        if filled:
            self.faults += 1
        else:
            self.warmup_faults += 1

    @property
    def total_faults(self):
        return self.faults + self.warmup_faults

    @property
    def miss_rate(self):
        if self.references == 0:
            return math.nan
        return self.faults / self.references * 100

    def __eq__(self, other):
        if not isinstance(other, Statistics):
            return NotImplemented
        return (self.faults, self.references, self.warmup_faults) == \
               (other.faults, other.references, other.warmup_faults)

    def __repr__(self):
        return (f"Statistics(faults={self.faults}, references={self.references}, "
                f"warmup_faults={self.warmup_faults})")

    def __str__(self):
        return f"Miss Rate = {self.faults} / {self.references} = {self.miss_rate:3.2f}%"
