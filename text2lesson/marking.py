"""Keep track of a learner's marks while working through a lesson."""

import enum
from dataclasses import dataclass, field
from typing import Any


class MarkState(enum.IntEnum):
    UNDEFINED = -1
    CORRECT = 0
    INCORRECT = 1
    SKIPPED = 2


@dataclass(frozen=True)
class MarkedItem:
    item: Any
    state: MarkState


@dataclass
class Marks:
    correct: int = 0
    incorrect: int = 0
    skipped: int = 0
    marked_items: list[MarkedItem] = field(default_factory=list)


class ItemMarker:
    """Records a mark per item and totals them on request."""

    def __init__(self):
        self._marked_items: list[MarkedItem] = []

    def reset(self) -> None:
        self._marked_items = []

    def mark_item(self, item: Any, state: MarkState) -> None:
        self._marked_items.append(MarkedItem(item=item, state=MarkState(state)))

    @property
    def marks(self) -> Marks:
        """Totals for the items marked since the last reset. UNDEFINED is not counted."""
        marks = Marks(marked_items=list(self._marked_items))
        for marked_item in self._marked_items:
            if marked_item.state == MarkState.CORRECT:
                marks.correct += 1
            elif marked_item.state == MarkState.INCORRECT:
                marks.incorrect += 1
            elif marked_item.state == MarkState.SKIPPED:
                marks.skipped += 1
        return marks
