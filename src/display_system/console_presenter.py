"""
Console presenter - shows the memory game in a terminal
"""

import asyncio
import sys
from typing import Dict, Optional, TextIO

from gameplay_system.interfaces import ILabelProvider, IPresenter
from gameplay_system.targets import Target

# Quadrant layout used when highlighting a target
_GRID_CELLS = [
    [Target.TOP_LEFT, Target.TOP_RIGHT],
    [Target.BOTTOM_LEFT, Target.BOTTOM_RIGHT],
]

DEFAULT_LABELS: Dict[Target, str] = {
    Target.TOP_LEFT: "Red button",
    Target.TOP_RIGHT: "Green button",
    Target.BOTTOM_LEFT: "Blue button",
    Target.BOTTOM_RIGHT: "Yellow button",
}


class ConsolePresenter(IPresenter):
    """
    Prints highlights, countdown steps and feedback to a text stream.

    A highlight draws the 2x2 grid with the active quadrant filled in, then
    holds for highlight_ms before returning.
    """

    def __init__(self, highlight_ms: int = 600, out: Optional[TextIO] = None):
        """
        Args:
            highlight_ms: How long each highlight is held
            out: Stream to write to (defaults to stdout)
        """
        self.highlight_ms = highlight_ms
        self.out = out if out is not None else sys.stdout
        self.subtitle = ""

    def _write(self, text: str) -> None:
        self.out.write(text + "\n")
        self.out.flush()

    async def highlight(self, target: Target) -> None:
        self._write(self.render_grid(target))
        await asyncio.sleep(self.highlight_ms / 1000.0)
        self._write("")

    def show_countdown(self, text: str) -> None:
        if text:
            self._write(f"   ... {text}")
        else:
            self._write("   GO!")

    def set_subtitle(self, text: str) -> None:
        self.subtitle = text
        if text:
            self._write(f"   {text}")

    def show_tap_feedback(self, is_correct: bool) -> None:
        self._write("   ✅" if is_correct else "   ❌")

    @staticmethod
    def render_grid(active: Target) -> str:
        """Draw the quadrant grid with the active target filled"""
        rows = []
        for row in _GRID_CELLS:
            rows.append(" ".join("[##]" if cell == active else "[  ]" for cell in row))
        return "\n".join(rows)


class StaticLabelProvider(ILabelProvider):
    """Accessible labels from a fixed table"""

    def __init__(self, labels: Optional[Dict[Target, str]] = None):
        self.labels = dict(DEFAULT_LABELS if labels is None else labels)

    def label_for(self, target: Target) -> str:
        return self.labels.get(target, "")
