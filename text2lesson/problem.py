"""
Assemble rendered problems from raw problem blocks.
"""

from dataclasses import dataclass, field

from .metadata import Metadata
from .text_item import TextItem
from .types import QuestionType, RawProblemBlock


def _empty_item() -> TextItem:
    return TextItem.create_from_source("")


@dataclass(frozen=True)
class Problem:
    """A single rendered problem of a lesson."""

    intro: TextItem = field(default_factory=_empty_item)
    question: TextItem = field(default_factory=_empty_item)
    right_answers: tuple[TextItem, ...] = ()
    wrong_answers: tuple[TextItem, ...] = ()
    explanation: TextItem = field(default_factory=_empty_item)
    question_type: QuestionType = QuestionType.slide

    @property
    def first_words_of_right_answers(self) -> list[str]:
        return [answer.first_word for answer in self.right_answers]

    @property
    def first_words_of_wrong_answers(self) -> list[str]:
        return [answer.first_word for answer in self.wrong_answers]


def classify_problem(
    question: TextItem, right_answers: list[TextItem] | tuple[TextItem, ...]
) -> QuestionType:
    """
    Derive the question type from the rendered question and right answers.

    Precedence:
        1. Empty question: slide
        2. One right answer: simple
        3. More than one right answer: multi
        4. A blank carrying a word: fill
        5. A blank without a word: order
        6. Otherwise: slide
    """
    if not question.html.strip():
        return QuestionType.slide
    if len(right_answers) == 1:
        return QuestionType.simple
    if len(right_answers) > 1:
        return QuestionType.multi
    missing_words = question.missing_words
    if any(word is not None for word in missing_words):
        return QuestionType.fill
    if any(word is None for word in missing_words):
        return QuestionType.order
    return QuestionType.slide


def assemble_problem(block: RawProblemBlock, metadata: Metadata | None = None) -> Problem:
    """
    Render every field of a raw block and classify the result.

    Args:
        block: Raw problem block from the splitter
        metadata: Lesson metadata shared by all problems of the lesson

    Returns:
        Problem
    """
    question = TextItem.create_from_source(block.question, metadata)
    right_answers = tuple(
        TextItem.create_from_source(answer, metadata) for answer in block.right_answers
    )
    return Problem(
        intro=TextItem.create_from_source(block.intro, metadata),
        question=question,
        right_answers=right_answers,
        wrong_answers=tuple(
            TextItem.create_from_source(answer, metadata)
            for answer in block.wrong_answers
        ),
        explanation=TextItem.create_from_source(block.explanation, metadata),
        question_type=classify_problem(question, right_answers),
    )
