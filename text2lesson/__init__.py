"""Convert plain-text lesson sources into structured, renderable lessons."""

from .types import (
    FieldKey,
    QuestionType,
    LineClassification,
    RawProblemBlock,
)
from .errors import (
    Text2LessonError,
    PrivateConstructorError,
    LessonSourceTooLargeError,
)
from .metadata import Metadata
from .text_item import TextItem, resolve
from .source_parser import LessonSource, classify_line, split_source
from .problem import Problem, assemble_problem, classify_problem
from .lesson import Lesson, parse_lesson, parse_lesson_file
from .answers import (
    AnswerState,
    choice_answer_states,
    fill_answer_options,
    order_answer_options,
    check_fill_answers,
    check_order_answers,
    are_answers_correct,
)
from .marking import ItemMarker, MarkState, Marks
from .markdown_renderer import render_inline
from .schemas import LessonSchema, ProblemSchema, TextItemSchema

__all__ = [
    "FieldKey",
    "QuestionType",
    "LineClassification",
    "RawProblemBlock",
    "Text2LessonError",
    "PrivateConstructorError",
    "LessonSourceTooLargeError",
    "Metadata",
    "TextItem",
    "resolve",
    "LessonSource",
    "classify_line",
    "split_source",
    "Problem",
    "assemble_problem",
    "classify_problem",
    "Lesson",
    "parse_lesson",
    "parse_lesson_file",
    "AnswerState",
    "choice_answer_states",
    "fill_answer_options",
    "order_answer_options",
    "check_fill_answers",
    "check_order_answers",
    "are_answers_correct",
    "ItemMarker",
    "MarkState",
    "Marks",
    "render_inline",
    "LessonSchema",
    "ProblemSchema",
    "TextItemSchema",
]
