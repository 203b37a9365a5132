# text2lesson/lesson.py
"""Parse lesson documents into Lessons."""

from dataclasses import dataclass, field
from pathlib import Path

from .metadata import Metadata
from .problem import Problem
from .source_parser import LessonSource


@dataclass
class Lesson:
    """Metadata and problems of one lesson. All problems share the metadata."""

    metadata: Metadata
    problems: list[Problem] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.metadata.get("TITLE", "")


def parse_lesson(text: str) -> Lesson:
    """
    Parse a lesson document into a Lesson.

    Args:
        text: Full text of the lesson source

    Returns:
        Lesson with metadata and problems
    """
    return LessonSource.create_from_source(text).convert_to_lesson()


def parse_lesson_file(path: Path | str) -> Lesson:
    """
    Parse a lesson source file from disk.

    Args:
        path: Path to the UTF-8 lesson file

    Returns:
        Lesson with metadata and problems
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_lesson(text)
