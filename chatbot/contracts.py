"""
Semantic contracts for the troubleshooting conversation bot.

This module defines immutable data structures shared between the
Question Store, the Conversation Engine and its callers. These are NOT
validators - validation of raw records happens once, in the Question Store.

Design principles:
- Frozen dataclasses (immutable after creation)
- Tuples instead of lists so a Question can be shared safely
- No dependencies on other modules

Contents:
- QuestionKind: Discriminant separating data-driven and synthetic questions
- AnswerOption: One permitted transition out of a question
- Question: A question record (terminal when it has no answer options)
- TurnResult: Structured result of one conversation turn

Usage:
    from chatbot.contracts import AnswerOption, Question, QuestionKind
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class QuestionKind(str, Enum):
    """
    Where a question came from.

    DATA:
        Loaded from the question source and held by the Question Store.
    ERROR:
        Synthesised when an answer cannot be resolved. Carries the answer
        options of the question that produced it so the user can retry.
    GUESS:
        Synthesised confirmation question ("Did you mean ...?").
        Never itself subject to guessing.
    """
    DATA = "data"
    ERROR = "error"
    GUESS = "guess"


@dataclass(frozen=True)
class AnswerOption:
    """
    Permitted answer and the question it leads to.

    Attributes:
        answer: Answer text as written in the source (original case).
            Matched case-insensitively.
        next_state: Id of the question this answer leads to.
            Not checked at load time.
    """
    answer: str
    next_state: str

    @classmethod
    def from_dict(cls, data: dict) -> "AnswerOption":
        """Build from a raw, already validated source record."""
        return cls(answer=data["answer"], next_state=data["nextState"])


@dataclass(frozen=True)
class Question:
    """
    Immutable question representation.

    A question is either terminal (no answer options, the conversation ends
    there) or branching (one or more answer options in source order).

    Attributes:
        id: Question identifier, unique within a loaded set.
        question: Text shown to the user.
        answer_options: Ordered answer options. Empty tuple for terminal
            questions.
        kind: DATA for stored questions, ERROR/GUESS for synthetic ones.
        origin_id: For synthetic questions, id of the stored question they
            were derived from (None when there was none). Always None for
            DATA questions.

    Examples:
        >>> q = Question(
        ...     id='internet',
        ...     question='Have you tried resetting your router?',
        ...     answer_options=(AnswerOption('Yes', 'cable'),),
        ... )
        >>> q.is_terminal
        False
        >>> q.is_synthetic
        False
    """
    id: str
    question: str
    answer_options: Tuple[AnswerOption, ...] = ()
    kind: QuestionKind = QuestionKind.DATA
    origin_id: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return not self.answer_options

    @property
    def is_synthetic(self) -> bool:
        return self.kind is not QuestionKind.DATA

    @classmethod
    def from_dict(cls, data: dict) -> "Question":
        """
        Build from a raw, already validated source record.

        Args:
            data: Dict with 'id', 'question' and optional 'answerOptions'

        Returns:
            Question of kind DATA
        """
        options = data.get("answerOptions") or []
        return cls(
            id=data["id"],
            question=data["question"],
            answer_options=tuple(AnswerOption.from_dict(o) for o in options),
        )


@dataclass(frozen=True)
class TurnResult:
    """
    Result of processing a single reply.

    Attributes:
        system_output: Text to show the user (the resolved question)
        question_id: Id of the resolved question ('error'/'guess' for
            synthetic questions)
        kind: QuestionKind of the resolved question
        conversation_complete: True when the resolved question is a stored
            terminal question
        answer_options: Answer texts the resolved question accepts
    """
    system_output: str
    question_id: str
    kind: QuestionKind
    conversation_complete: bool
    answer_options: Tuple[str, ...] = ()

    @classmethod
    def from_question(cls, question: Question) -> "TurnResult":
        return cls(
            system_output=question.question,
            question_id=question.id,
            kind=question.kind,
            conversation_complete=question.is_terminal and not question.is_synthetic,
            answer_options=tuple(o.answer for o in question.answer_options),
        )
