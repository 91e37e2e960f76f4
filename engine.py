# engine.py

from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence


class ReplacementPolicy:
    """
    Names of the available page replacement algorithms.

    FIFO: First-In-First-Out - replaces the page loaded earliest
    LRU:  Least Recently Used - replaces the page not used for longest time
    OPT:  Optimal - replaces the page whose next use is furthest away
    """
    FIFO = "FIFO"
    LRU = "LRU"
    OPT = "OPT"

    ALL = (FIFO, LRU, OPT)


@dataclass(frozen=True)
class MemoryAccess:
    """
    Outcome of a single access in the trace.

    Attributes:
        page_no (int): The page that was referenced
        hit (bool): True if the page was already resident, False on a fault
    """
    page_no: int
    hit: bool

    def __str__(self):
        return str(self.page_no)


class MemoryAccesses:
    """Ordered outcomes of one run, one entry per trace position."""

    def __init__(self, accesses: Optional[List[MemoryAccess]] = None):
        self.accesses: List[MemoryAccess] = list(accesses or [])

    def hits(self) -> int:
        return sum(1 for access in self.accesses if access.hit)

    def misses(self) -> int:
        return sum(1 for access in self.accesses if not access.hit)

    def __len__(self):
        return len(self.accesses)

    def __iter__(self):
        return iter(self.accesses)

    def __getitem__(self, index):
        return self.accesses[index]

    def __str__(self):
        return " ".join(str(access) for access in self.accesses)


class PagingPolicy:
    """
    Common driver for the replacement policies.

    A policy instance is built for one trace, consumed by a single call to
    ``run`` and read-only afterwards. Subclasses only decide which slot to
    evict and how to keep their own arrival or recency bookkeeping.

    Attributes:
        frame_count (int): Number of physical frames available
        access_count (int): Expected trace length
        frames (List[List[int]]): Frame state after every step
        event_log (List[str]): Log of all memory access events
    """

    name: str = ""

    def __init__(self, frame_count: int, access_count: int = 0):
        if frame_count < 0:
            raise ValueError("frame_count must not be negative")
        if access_count < 0:
            raise ValueError("access_count must not be negative")

        self.frame_count = frame_count
        self.access_count = access_count
        self.frames: List[List[int]] = []
        self.results = MemoryAccesses()
        self.event_log: List[str] = []
        self._consumed = False

    # -----------------------------
    # Simulation
    # -----------------------------
    def run(self, accesses: Iterable[int]) -> MemoryAccesses:
        if self._consumed:
            raise RuntimeError(f"{self.name} policy has already been run")
        self._consumed = True

        trace = list(accesses)
        self.access_count = len(trace)

        for position, page_no in enumerate(trace):
            state = list(self.frames[position - 1]) if position > 0 else []

            if page_no in state:
                self._record_hit(page_no)
                self.event_log.append(f"Hit: Page {page_no} in Frame {state.index(page_no)}")
                hit = True
            elif len(state) < self.frame_count:
                self.event_log.append(f"Fault: Page {page_no} not in memory")
                state.append(page_no)
                self._record_load(page_no)
                self.event_log.append(f"Loaded: Page {page_no} -> Frame {len(state) - 1}")
                hit = False
            elif self.frame_count == 0:
                self.event_log.append(f"Fault: Page {page_no} dropped (no frames)")
                hit = False
            else:
                self.event_log.append(f"Fault: Page {page_no} not in memory")
                slot = self._select_victim(state, trace, position)
                evicted = state[slot]
                self.event_log.append(f"Evicting: Page {evicted} from Frame {slot}")
                state[slot] = page_no
                self._record_replace(evicted, page_no)
                self.event_log.append(f"Loaded: Page {page_no} -> Frame {slot} (replaced)")
                hit = False

            self.results.accesses.append(MemoryAccess(page_no, hit))
            self.frames.append(state)

        return self.results

    # Bookkeeping hooks, no-ops unless a policy tracks order.
    def _record_hit(self, page_no: int):
        pass

    def _record_load(self, page_no: int):
        pass

    def _record_replace(self, evicted: int, page_no: int):
        pass

    def _select_victim(self, state: List[int], trace: Sequence[int], position: int) -> int:
        raise NotImplementedError

    # -----------------------------
    # Queries
    # -----------------------------
    @property
    def frame_history(self) -> List[List[int]]:
        return [list(state) for state in self.frames]

    def gen_table(self) -> List[List[Optional[int]]]:
        """
        Build the frame occupancy grid.

        Returns:
            List[List[Optional[int]]]: One row per frame slot, one column per
            step. A cell is None while the slot has not been filled yet.
        """
        table = []
        for slot in range(self.frame_count):
            table.append([state[slot] if slot < len(state) else None for state in self.frames])
        return table

    def get_stats(self) -> Dict[str, float]:
        hits = self.results.hits()
        faults = self.results.misses()
        total_refs = hits + faults
        hit_ratio = (hits / total_refs) if total_refs > 0 else 0.0
        fault_rate = (faults / total_refs) if total_refs > 0 else 0.0

        return {
            "hits": hits,
            "faults": faults,
            "hit_ratio": round(hit_ratio, 4),
            "fault_rate": round(fault_rate, 4),
            "total_refs": total_refs,
        }


class FIFOPolicy(PagingPolicy):
    name = ReplacementPolicy.FIFO

    def __init__(self, frame_count: int, access_count: int = 0):
        super().__init__(frame_count, access_count)
        # Arrival order: newest on the right, oldest popped from the left
        self.fifo_queue: deque = deque()

    def _record_load(self, page_no):
        self.fifo_queue.append(page_no)

    def _record_replace(self, evicted, page_no):
        self.fifo_queue.append(page_no)

    def _select_victim(self, state, trace, position):
        return state.index(self.fifo_queue.popleft())


class LRUPolicy(PagingPolicy):
    name = ReplacementPolicy.LRU

    def __init__(self, frame_count: int, access_count: int = 0):
        super().__init__(frame_count, access_count)
        # Recency order: most recently used on the right
        self.lru_queue: deque = deque()

    def _record_hit(self, page_no):
        self.lru_queue.remove(page_no)
        self.lru_queue.append(page_no)

    def _record_load(self, page_no):
        self.lru_queue.append(page_no)

    def _record_replace(self, evicted, page_no):
        self.lru_queue.append(page_no)

    def _select_victim(self, state, trace, position):
        return state.index(self.lru_queue.popleft())


class OPTPolicy(PagingPolicy):
    """
    Belady's optimal replacement. Needs the whole trace up front, so the
    victim is chosen by looking ahead from the current position.
    """

    name = ReplacementPolicy.OPT

    def _select_victim(self, state, trace, position):
        furthest_slot = 0
        furthest_use = -1

        for slot, page_no in enumerate(state):
            next_use = next_use_of(page_no, trace, position + 1)
            if next_use is None:
                return slot
            if next_use > furthest_use:
                furthest_use = next_use
                furthest_slot = slot

        return furthest_slot


def next_use_of(page_no: int, trace: Sequence[int], start: int) -> Optional[int]:
    """Index of the first reference to page_no at or after start, or None."""
    for index in range(start, len(trace)):
        if trace[index] == page_no:
            return index
    return None


POLICIES = {
    ReplacementPolicy.FIFO: FIFOPolicy,
    ReplacementPolicy.LRU: LRUPolicy,
    ReplacementPolicy.OPT: OPTPolicy,
}


def create_policy(name: str, frame_count: int, access_count: int = 0) -> PagingPolicy:
    policy_class = POLICIES.get(name.upper())
    if policy_class is None:
        raise ValueError(f"Unknown replacement policy: {name}")
    return policy_class(frame_count, access_count)


def simulate(name: str, frame_count: int, accesses: Iterable[int]) -> PagingPolicy:
    trace = list(accesses)
    policy = create_policy(name, frame_count, len(trace))
    policy.run(trace)
    return policy
