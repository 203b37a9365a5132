"""
Type definitions for lesson sources.
"""

import enum
from dataclasses import dataclass, field


class FieldKey(str, enum.Enum):
    """Marker characters that open a field of a problem block."""

    intro = "i"
    question = "?"
    right_answer = "="
    wrong_answer = "x"
    explanation = "&"
    question_break = "_"

    @classmethod
    def from_marker(cls, marker: str) -> "FieldKey":
        """Get the key for a marker character. Case insensitive; ``+`` means explanation."""
        marker = marker.lower()
        if marker == "+":
            return cls.explanation
        return cls(marker)


class QuestionType(str, enum.Enum):
    """Interaction type derived from the shape of a problem."""

    slide = "slide"
    simple = "simple"
    multi = "multi"
    fill = "fill"
    order = "order"


@dataclass(frozen=True)
class LineClassification:
    """Result of classifying one physical line of a lesson source."""

    key: FieldKey | None
    content: str


@dataclass
class RawProblemBlock:
    """Unrendered text collected for one problem."""

    intro: str = ""
    question: str = ""
    right_answers: list[str] = field(default_factory=list)
    wrong_answers: list[str] = field(default_factory=list)
    explanation: str = ""

    @property
    def is_empty(self) -> bool:
        return not (
            self.intro
            or self.question
            or self.right_answers
            or self.wrong_answers
            or self.explanation
        )
