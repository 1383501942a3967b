from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import IDLE_LABEL
from .models import TimelineBlock


def _width(block: TimelineBlock, scale: int) -> int:
    return max(1, block.duration * scale)


def render_gantt(blocks: List[TimelineBlock], scale: int = 1) -> str:
    """
    Plain-text Gantt chart; idle blocks are drawn with dots.
    """
    if not blocks:
        return "(no execution)"

    line = "|"
    labels = ""
    time_marks = "0"

    for block in blocks:
        width = _width(block, scale)
        fill = "." if block.label == IDLE_LABEL else "="
        line += fill * width
        labels += block.label[:width].ljust(width)
        time_marks += f"{block.end:>{width}}" if width >= len(str(block.end)) else f" {block.end}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            " " + labels,
            time_marks,
        ]
    )


def build_rich_gantt(blocks: List[TimelineBlock], scale: int = 1) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not blocks:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["green", "cyan", "blue", "magenta", "yellow", "red"]
    label_to_color: Dict[str, str] = {}

    def label_color(label: str) -> str:
        if label == IDLE_LABEL:
            return "grey37"
        if label not in label_to_color:
            idx = len(label_to_color) % len(colors)
            label_to_color[label] = colors[idx]
        return label_to_color[label]

    timeline = Text()
    labels = Text()
    time_marks = "0"

    for block in blocks:
        width = _width(block, scale)
        timeline.append(" " * width, style=f"on {label_color(block.label)}")
        labels.append(block.label[:width].ljust(width), style="dim" if block.label == IDLE_LABEL else "bold")
        time_marks += f"{block.end:>{width}}" if width >= len(str(block.end)) else f" {block.end}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
