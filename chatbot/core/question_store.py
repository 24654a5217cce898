"""
Question Store - Immutable index of the question tree

Responsibilities:
- Validate raw question records (fail fast, first error wins)
- Index questions by id
- Remember the start question (first record in the source list)

Design principles:
- Immutable: built once, never mutated afterwards
- Shareable: safe to read from any number of Conversation Engines
- No I/O: consumes already-parsed data (see utils/question_loader.py)

Duplicate ids are not rejected: the last record with a given id wins,
and a warning is logged for each overwrite.
"""

import logging
from types import MappingProxyType
from typing import Iterator, List, Tuple

from chatbot.contracts import Question
from chatbot.errors import (
    AnswerOptionsNotArrayError,
    EmptyQuestionListError,
    InvalidAnswerOptionError,
    MissingIdOrQuestionError,
    NotAnArrayError,
    UnknownQuestionError,
)

logger = logging.getLogger(__name__)


def _is_filled(value) -> bool:
    return isinstance(value, str) and bool(value)


class QuestionStore:
    """
    Read-only mapping from question id to Question.

    Built from a validated, ordered list of raw records. The first record's
    id is the start question id.
    """

    def __init__(self, questions):
        """
        Validate and index questions.

        Args:
            questions: Ordered list of raw question dicts, e.g.
                [{"id": "start", "question": "...",
                  "answerOptions": [{"answer": "...", "nextState": "..."}]}]

        Raises:
            NotAnArrayError: questions is not a list
            EmptyQuestionListError: questions is an empty list
            MissingIdOrQuestionError: a record lacks id or question text
            AnswerOptionsNotArrayError: a record's answerOptions is not a list
            InvalidAnswerOptionError: an answer option lacks answer or nextState
        """
        self._validate_questions(questions)

        index = {}
        order: List[str] = []
        for record in questions:
            question = Question.from_dict(record)
            if question.id in index:
                logger.warning(f"Duplicate question id '{question.id}', last definition wins")
            else:
                order.append(question.id)
            index[question.id] = question

        self._questions = MappingProxyType(index)
        self._order: Tuple[str, ...] = tuple(order)
        self._start_id: str = questions[0]["id"]

        logger.info(f"Question Store initialized with {len(index)} questions (start: '{self._start_id}')")

    @classmethod
    def build(cls, questions) -> "QuestionStore":
        return cls(questions)

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def start_id(self) -> str:
        return self._start_id

    @property
    def start_question(self) -> Question:
        return self._questions[self._start_id]

    def get(self, question_id: str) -> Question:
        """
        Look up a question by id.

        Raises:
            UnknownQuestionError: No question with this id was loaded
        """
        try:
            return self._questions[question_id]
        except KeyError:
            raise UnknownQuestionError(question_id) from None

    def ids(self) -> Tuple[str, ...]:
        """Question ids in first-seen source order."""
        return self._order

    def __contains__(self, question_id) -> bool:
        return question_id in self._questions

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return (self._questions[q_id] for q_id in self._order)

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate_questions(self, questions) -> None:
        """
        Verify raw records are in the required format.

        Checks run in order and the first failure is raised:
        - questions is a list (and not empty)
        - each record has id and question
        - each record's answerOptions, if present, is a list
        - each answer option has answer and nextState
        """
        if not isinstance(questions, list):
            raise NotAnArrayError()

        if not questions:
            raise EmptyQuestionListError()

        for record in questions:
            if not (isinstance(record, dict)
                    and _is_filled(record.get("id"))
                    and _is_filled(record.get("question"))):
                raise MissingIdOrQuestionError()

            self._validate_answer_options(record.get("answerOptions"))

    def _validate_answer_options(self, answer_options) -> None:
        # Absent or null answerOptions mean a terminal question
        if answer_options is None or answer_options in ("", 0):
            return

        if not isinstance(answer_options, list):
            raise AnswerOptionsNotArrayError()

        for option in answer_options:
            if not (isinstance(option, dict)
                    and _is_filled(option.get("answer"))
                    and _is_filled(option.get("nextState"))):
                raise InvalidAnswerOptionError()
