"""Serializable models of a parsed lesson for presentation layers."""

from pydantic import BaseModel

from .lesson import Lesson
from .problem import Problem
from .text_item import TextItem
from .types import QuestionType


class TextItemSchema(BaseModel):
    html: str = ""
    plain_text: str = ""
    missing_words: list[str | None] = []

    @classmethod
    def from_text_item(cls, item: TextItem) -> "TextItemSchema":
        return cls(
            html=item.html,
            plain_text=item.plain_text,
            missing_words=item.missing_words,
        )


class ProblemSchema(BaseModel):
    intro: TextItemSchema
    question: TextItemSchema
    right_answers: list[TextItemSchema] = []
    wrong_answers: list[TextItemSchema] = []
    explanation: TextItemSchema
    question_type: QuestionType

    @classmethod
    def from_problem(cls, problem: Problem) -> "ProblemSchema":
        return cls(
            intro=TextItemSchema.from_text_item(problem.intro),
            question=TextItemSchema.from_text_item(problem.question),
            right_answers=[
                TextItemSchema.from_text_item(item) for item in problem.right_answers
            ],
            wrong_answers=[
                TextItemSchema.from_text_item(item) for item in problem.wrong_answers
            ],
            explanation=TextItemSchema.from_text_item(problem.explanation),
            question_type=problem.question_type,
        )


class LessonSchema(BaseModel):
    """Response model for a parsed lesson."""

    title: str = ""
    metadata: dict[str, str] = {}
    problems: list[ProblemSchema] = []

    @classmethod
    def from_lesson(cls, lesson: Lesson) -> "LessonSchema":
        return cls(
            title=lesson.title,
            metadata=dict(lesson.metadata.items()),
            problems=[ProblemSchema.from_problem(problem) for problem in lesson.problems],
        )
