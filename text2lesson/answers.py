"""
Answer options and answer checking for lesson problems.

Presentation layers build their controls from these helpers and pass the
learner's responses back for checking.
"""

import enum
from collections.abc import Iterable, Sequence

from .problem import Problem

# Option shown before the learner has chosen anything.
UNSELECTED_OPTION = "..."


class AnswerState(str, enum.Enum):
    """Outcome for one answer of a choice problem."""

    correct = "correct"  # right answer, selected
    incorrect = "incorrect"  # wrong answer, selected
    missed = "missed"  # right answer, not selected
    avoided = "avoided"  # wrong answer, not selected


def choice_answer_states(
    problem: Problem, selected_indices: Iterable[int]
) -> list[AnswerState]:
    """
    Get the state of every answer of a simple or multi problem.

    Args:
        problem: The problem being answered
        selected_indices: Indices into ``right_answers + wrong_answers`` that
            the learner selected

    Returns:
        One AnswerState per answer, right answers first
    """
    selected = set(selected_indices)
    states = []
    for index in range(len(problem.right_answers)):
        states.append(AnswerState.correct if index in selected else AnswerState.missed)
    offset = len(problem.right_answers)
    for index in range(len(problem.wrong_answers)):
        states.append(
            AnswerState.incorrect if index + offset in selected else AnswerState.avoided
        )
    return states


def are_answers_correct(states: Iterable[AnswerState | bool]) -> bool:
    """True if every answer was handled correctly."""
    for state in states:
        if isinstance(state, AnswerState):
            if state not in (AnswerState.correct, AnswerState.avoided):
                return False
        elif not state:
            return False
    return True


def _with_unselected(options: Iterable[str]) -> list[str]:
    return [UNSELECTED_OPTION, *sorted(options)]


def fill_answer_options(problem: Problem) -> list[str]:
    """
    Options offered for every blank of a fill problem.

    The missing words plus the first words of the wrong answers as red
    herrings, preceded by the unselected option.
    """
    missing_words = [word for word in problem.question.missing_words if word]
    return _with_unselected(missing_words + problem.first_words_of_wrong_answers)


def order_answer_options(problem: Problem) -> list[str]:
    """Options offered for every position of an order problem."""
    return _with_unselected(
        problem.first_words_of_right_answers + problem.first_words_of_wrong_answers
    )


def _check_positions(expected: Sequence[str | None], given: Sequence[str]) -> list[bool]:
    results = []
    for index, expected_answer in enumerate(expected):
        given_answer = given[index] if index < len(given) else UNSELECTED_OPTION
        results.append(expected_answer is not None and given_answer == expected_answer)
    return results


def check_fill_answers(problem: Problem, given: Sequence[str]) -> list[bool]:
    """
    Check the words chosen for the blanks of a fill problem.

    Args:
        problem: The fill problem
        given: Chosen word per blank, in document order. Missing entries count
            as unselected.

    Returns:
        Per-blank result
    """
    return _check_positions(problem.question.missing_words, given)


def check_order_answers(problem: Problem, given: Sequence[str]) -> list[bool]:
    """
    Check the words chosen for each position of an order problem.

    The expected order is the first words of the right answers. A problem
    classified as order has no right answers, so there is nothing to check
    against; every position then fails rather than passing vacuously.

    Args:
        problem: The problem being answered
        given: Chosen word per position

    Returns:
        Per-position result, never empty
    """
    expected = problem.first_words_of_right_answers
    if not expected:
        return [False] * max(len(given), 1)
    return _check_positions(expected, given)
