# utils.py

import random
import re
from typing import Dict, List, Optional

import plotly.graph_objects as go

from engine import MemoryAccesses, PagingPolicy, ReplacementPolicy, simulate

DEFAULT_FRAMES = 3
DEFAULT_POLICY = ReplacementPolicy.LRU
DEFAULT_TRACE = "1 2 3 4 1 2 5 1 2 3 4 5"
MAX_RANDOM_PAGE = 9

HIT_COLOR = "lightgreen"
MISS_COLOR = "salmon"
EMPTY_COLOR = "white"


class Colors:
    GREEN = "\033[92m"
    RED = "\033[91m"
    END = "\033[0m"


# -----------------------------
# Trace loading
# -----------------------------
def parse_trace(text: str) -> List[int]:
    """Split on whitespace and commas and convert every token to a page number."""
    pages = []
    for token in re.split(r"[\s,]+", text.strip()):
        if token == "":
            continue
        try:
            pages.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid page reference: {token!r}") from None
    return pages


def generate_trace(length: int, max_page: int = MAX_RANDOM_PAGE, seed: Optional[int] = None) -> List[int]:
    if length < 0:
        raise ValueError("trace length must not be negative")
    if max_page < 0:
        raise ValueError("max_page must not be negative")
    rng = random.Random(seed)
    return [rng.randint(0, max_page) for _ in range(length)]


def compare_policies(frame_count: int, trace: List[int]) -> Dict[str, Dict[str, float]]:
    return {name: simulate(name, frame_count, trace).get_stats() for name in ReplacementPolicy.ALL}


# -----------------------------
# Terminal rendering
# -----------------------------
def get_color(hit):
    """Return a color for hit/miss cells."""
    return HIT_COLOR if hit else MISS_COLOR


def format_accesses(accesses: MemoryAccesses, color: bool = True) -> str:
    if not color:
        return str(accesses)
    out = []
    for access in accesses:
        code = Colors.GREEN if access.hit else Colors.RED
        out.append(f"{code}{access.page_no}{Colors.END}")
    return " ".join(out)


def format_table(table: List[List[Optional[int]]]) -> str:
    """
    Render the frame grid as a bordered text table.

    Cells are padded to the widest page number so the columns line up.
    A grid without frames or without steps renders as an empty string.
    """
    rows = [["" if cell is None else str(cell) for cell in row] for row in table]
    if not rows or not rows[0]:
        return ""

    width = max([len(cell) for row in rows for cell in row] + [1])
    border = "+" + "+".join("-" * (width + 2) for _ in rows[0]) + "+"

    lines = [border]
    for row in rows:
        lines.append("|" + "|".join(f" {cell:<{width}} " for cell in row) + "|")
        lines.append(border)
    return "\n".join(lines)


# -----------------------------
# Plotly figures
# -----------------------------
def build_outcome_figure(accesses: MemoryAccesses) -> go.Figure:
    labels = [f"Step {i}" for i in range(len(accesses))]
    values = [[str(access.page_no)] for access in accesses]
    colors = [[get_color(access.hit)] for access in accesses]

    fig = go.Figure(go.Table(
        header=dict(values=labels),
        cells=dict(values=values, fill_color=colors),
    ))
    fig.update_layout(height=120, margin=dict(l=0, r=0, t=0, b=0))
    return fig


def build_history_figure(policy: PagingPolicy) -> go.Figure:
    """
    Frame history grid: one row per frame, one column per step.

    The cell holding the page referenced at a step is colored by that
    step's outcome; every other cell stays white.
    """
    table = policy.gen_table()
    accesses = policy.results

    columns = []
    fills = []
    for step, access in enumerate(accesses):
        column = [table[slot][step] for slot in range(policy.frame_count)]
        columns.append(["" if cell is None else str(cell) for cell in column])
        fills.append([get_color(access.hit) if cell == access.page_no else EMPTY_COLOR for cell in column])

    frame_labels = [f"F{slot}" for slot in range(policy.frame_count)]
    header = ["Frame"] + [str(access.page_no) for access in accesses]

    fig = go.Figure(go.Table(
        header=dict(values=header),
        cells=dict(values=[frame_labels] + columns, fill_color=[[EMPTY_COLOR] * len(frame_labels)] + fills),
    ))
    fig.update_layout(height=80 + 30 * policy.frame_count, margin=dict(l=0, r=0, t=0, b=0))
    return fig


def build_comparison_figure(stats: Dict[str, Dict[str, float]]) -> go.Figure:
    names = list(stats)
    fig = go.Figure()
    fig.add_trace(go.Bar(name="Hits", x=names, y=[stats[n]["hits"] for n in names], marker_color=HIT_COLOR))
    fig.add_trace(go.Bar(name="Faults", x=names, y=[stats[n]["faults"] for n in names], marker_color=MISS_COLOR))
    fig.update_layout(height=300, title="Hits vs Faults", barmode="group")
    return fig
