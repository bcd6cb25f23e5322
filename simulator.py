from memory_manager import FrameTable, Statistics, age_all, slot_with_max
from page_trace import load_trace
from reference_index import ReferenceIndex

ALGORITHMS = ['FIFO', 'LRU', 'OPT']
ALIASES = {'EXTRA': 'OPT'}


def display(frames, page, faulted):
    """
    Render one step: the page just referenced, then the frames in slot
    order with free frames left blank, and F if the step was a counted fault.
    """
    cells = ['  ' if resident is None else f"{resident:2d}" for resident in frames]
    line = f"{page:2d}: [{'|'.join(cells)}]"
    if faulted:
        line += " F"
    return line


def fifo(pages, num_frames, verbose=False):
    memory = FrameTable(num_frames)
    stats = Statistics()
    pointer = 0  # Slot holding the page that was loaded first

    for page in pages:
        filled = memory.is_filled()
        stats.record_reference(filled)

        faulted = memory.locate(page) is None
        if faulted:
            # Hits never move the pointer, so eviction follows load order only
            memory.load(pointer, page)
            pointer = (pointer + 1) % num_frames
            stats.record_page_fault(filled)

        if verbose:
            print(display(memory.frames, page, faulted and filled))

    return stats


def lru(pages, num_frames, verbose=False):
    memory = FrameTable(num_frames)
    stats = Statistics()
    ages = [0] * num_frames

    for page in pages:
        age_all(ages)
        filled = memory.is_filled()
        stats.record_reference(filled)

        slot = memory.locate(page)
        faulted = slot is None
        if faulted:
            # Free frames are used before anything is evicted
            slot = memory.free_slot()
            if slot is None:
                slot = slot_with_max(ages)
            memory.load(slot, page)
            stats.record_page_fault(filled)
        ages[slot] = 0

        if verbose:
            print(display(memory.frames, page, faulted and filled))

    return stats


def opt(pages, num_frames, verbose=False):
    """
    Optimal replacement: evict the page whose next reference is farthest in
    the future, or that is never referenced again. When several pages are
    never referenced again the first frame holding one of them is evicted.
    """
    memory = FrameTable(num_frames)
    stats = Statistics()
    future = ReferenceIndex(pages)

    for position, page in enumerate(pages):
        filled = memory.is_filled()
        stats.record_reference(filled)

        faulted = memory.locate(page) is None
        if faulted:
            slot = memory.free_slot()
            if slot is None:
                distances = [future.distance(resident, position) for resident in memory.frames]
                slot = slot_with_max(distances)
            memory.load(slot, page)
            stats.record_page_fault(filled)

        if verbose:
            print(display(memory.frames, page, faulted and filled))

    return stats


def normalize_algorithm(algorithm):
    name = algorithm.upper()
    name = ALIASES.get(name, name)
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algorithm}")
    return name


def run_policy(algorithm, pages, num_frames, verbose=False):
    algorithm = normalize_algorithm(algorithm)
    if algorithm == 'FIFO':
        return fifo(pages, num_frames, verbose)
    elif algorithm == 'LRU':
        return lru(pages, num_frames, verbose)
    else:
        return opt(pages, num_frames, verbose)


class PageReplacementSimulator:

    def __init__(self, algorithm='FIFO', num_frames=3, verbose=False):
        self.algorithm = normalize_algorithm(algorithm)
        if num_frames < 1:
            raise ValueError(f"Number of frames must be positive, got {num_frames}")
        self.num_frames = num_frames
        self.verbose = verbose

    def run(self, pages):
        return run_policy(self.algorithm, pages, self.num_frames, self.verbose)

    def run_simulation(self, filename):
        pages = load_trace(filename)
        if not pages:
            raise ValueError(f"{filename}: no page references found")

        print(f"\n{'='*60}")
        print(f"Running {self.algorithm} with {self.num_frames} frames on {filename}")
        print(f"{'='*60}")

        stats = self.run(pages)

        print(f"\n{stats}")
        print(f"{'='*60}\n")

        return stats
