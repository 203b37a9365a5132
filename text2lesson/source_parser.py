# text2lesson/source_parser.py
"""
Split a lesson source document into metadata and raw problem blocks.

A lesson source is plain text. Lines before the first key line are metadata.
A key line starts with a marker identifying the field that the following
text belongs to, for example::

    TITLE: Capitals
    (i) Some information about capitals.
    (?) What is the capital of France?
    (=) Paris
    (x) Lyon
    (+) Paris has been the capital since 987.

Markers may be decorated: ``(i)``, ``i)``, ``((i))``, ``iii_``, ``- (?)`` and
``# i`` are all intro or question markers. Up to three leading filler
characters from ``-#_*`` and space are allowed.
"""

import logging
import re
from dataclasses import dataclass, replace

from .config import get_max_source_length
from .errors import LessonSourceTooLargeError, PrivateConstructorError
from .types import FieldKey, LineClassification, RawProblemBlock

logger = logging.getLogger(__name__)

# Groups: 1 the key character, 2 the content.
LINE_PATTERN = re.compile(r"^[-#_* ]{0,3}(?:\(*([i?=x&_+])\1*[_) ]+)(.*)$", re.IGNORECASE)

_LINE_BREAK = re.compile(r"\r\n|\n")

_FACTORY_TOKEN = object()


# -----------------------------------------------------------------------------
# Line classification
# -----------------------------------------------------------------------------


def classify_line(line: str) -> LineClassification:
    """
    Classify one physical line of a lesson source.

    Args:
        line: Line without its terminator

    Returns:
        LineClassification. Lines that are not key lines have no key and the
        whole line, unaltered, as content.
    """
    match = LINE_PATTERN.match(line)
    if not match:
        return LineClassification(key=None, content=line)
    return LineClassification(
        key=FieldKey.from_marker(match.group(1)), content=match.group(2) or ""
    )


# -----------------------------------------------------------------------------
# Splitter state machine
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class SplitterState:
    """Key of the open field and the text collected for it so far."""

    current_key: FieldKey | None = None
    pending: str = ""


@dataclass(frozen=True)
class FlushAction:
    """
    Pending text to store.

    ``key`` is the field the text belongs to, or None for metadata.
    ``next_key`` is the key line that caused the flush, or None at the end of
    the document.
    """

    key: FieldKey | None
    data: str
    next_key: FieldKey | None = None


def transition(
    state: SplitterState, line: LineClassification
) -> tuple[SplitterState, FlushAction | None]:
    """
    Advance the splitter by one classified line.

    Continuation lines are appended to the pending text. A key line flushes
    the pending text to the open field and opens its own field.
    """
    if line.key is None:
        return replace(state, pending=f"{state.pending}{line.content}\n"), None
    flush = FlushAction(key=state.current_key, data=state.pending, next_key=line.key)
    pending = f"{line.content}\n" if line.content else ""
    return SplitterState(current_key=line.key, pending=pending), flush


def finish(state: SplitterState) -> FlushAction | None:
    """Flush whatever text is pending at the end of the document."""
    if not state.pending:
        return None
    return FlushAction(key=state.current_key, data=state.pending)


def starts_new_problem(
    previous_key: FieldKey | None, new_key: FieldKey, block: RawProblemBlock
) -> bool:
    """
    Check whether a key line starts a new problem block.

    A new block starts after a question break, or when an intro or question
    key arrives and that field of the current block is already filled.
    """
    if previous_key == FieldKey.question_break:
        return True
    if new_key == FieldKey.intro:
        return bool(block.intro)
    if new_key == FieldKey.question:
        return bool(block.question)
    return False


def add_to_block(block: RawProblemBlock, key: FieldKey, data: str) -> None:
    """
    Store flushed text in a block.

    Intro, question and explanation are assigned; answers are appended.
    Nothing is stored for a question break. An empty explanation never
    replaces an existing one.
    """
    if key == FieldKey.intro:
        block.intro = data
    elif key == FieldKey.question:
        block.question = data
    elif key == FieldKey.right_answer:
        block.right_answers.append(data)
    elif key == FieldKey.wrong_answer:
        block.wrong_answers.append(data)
    elif key == FieldKey.explanation:
        if block.explanation:
            if not data:
                return
            logger.warning("Explanation overwritten by a later explanation key")
        block.explanation = data


def split_source(document: str) -> tuple[str, list[RawProblemBlock]]:
    """
    Split a document into its metadata text and raw problem blocks.

    Never fails on malformed input; text that is not under a key is metadata
    or a continuation of the open field. The first block is always present,
    even if nothing is stored in it.

    Args:
        document: Full lesson source

    Returns:
        Tuple of (metadata text, raw problem blocks)
    """
    metadata_text = ""
    block = RawProblemBlock()
    blocks = [block]
    state = SplitterState()

    def apply(flush: FlushAction) -> None:
        nonlocal metadata_text
        if flush.key is None:
            metadata_text += flush.data
        else:
            add_to_block(block, flush.key, flush.data)

    for line in _LINE_BREAK.split(document):
        previous_key = state.current_key
        state, flush = transition(state, classify_line(line))
        if flush is None:
            continue
        apply(flush)
        if starts_new_problem(previous_key, flush.next_key, block):
            block = RawProblemBlock()
            blocks.append(block)

    flush = finish(state)
    if flush is not None:
        apply(flush)

    logger.debug("Split lesson source into %d problem blocks", len(blocks))
    return metadata_text, blocks


# -----------------------------------------------------------------------------
# Lesson source
# -----------------------------------------------------------------------------


class LessonSource:
    """Metadata text and raw problem blocks of one lesson document."""

    def __init__(
        self,
        metadata_source: str = "",
        problem_sources: list[RawProblemBlock] | None = None,
        *,
        _token: object = None,
    ):
        if _token is not _FACTORY_TOKEN:
            raise PrivateConstructorError(
                "Private constructor. Use LessonSource.create_from_source"
            )
        self._metadata_source = metadata_source
        self._problem_sources = list(problem_sources or [])

    @classmethod
    def create_from_source(cls, source: str | None) -> "LessonSource":
        """
        Create a LessonSource from a lesson document.

        Raises:
            LessonSourceTooLargeError: If the document is longer than
                TEXT2LESSON_MAX_SOURCE_LENGTH
        """
        source = source or ""
        max_length = get_max_source_length()
        if max_length and len(source) > max_length:
            raise LessonSourceTooLargeError(
                f"Lesson source has {len(source)} characters; the limit is {max_length}"
            )
        metadata_source, problem_sources = split_source(source)
        return cls(metadata_source, problem_sources, _token=_FACTORY_TOKEN)

    @property
    def metadata_source(self) -> str:
        return self._metadata_source

    @property
    def problem_sources(self) -> list[RawProblemBlock]:
        return list(self._problem_sources)

    def convert_to_lesson(self):
        """Build the Lesson: extract metadata and assemble every problem."""
        from .lesson import Lesson
        from .metadata import Metadata
        from .problem import assemble_problem

        metadata = Metadata.create_from_source(self._metadata_source)
        problems = [assemble_problem(block, metadata) for block in self._problem_sources]
        return Lesson(metadata=metadata, problems=problems)
