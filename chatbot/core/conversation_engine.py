"""
Conversation Engine - Next-question resolution for one conversation

Responsibilities:
- Hold the current question of a single conversation
- Resolve each reply to the next question (ordered decision chain)
- Synthesise error and guess (confirmation) questions

Decision chain, first matching rule wins:
1. Normalize: strip and lowercase the answer; empty means "no answer"
2. Restart: no current question, or a terminal one, and no answer
   -> start question
3. No answer mid-conversation, or an answer before the conversation
   started -> error question
4. Exact match against the current question's answer options (in order)
   -> the option's next question
5. Guess: exactly one option contained in the answer -> confirmation
   question. Never applied to a confirmation question itself, so a guess
   is offered at most once per ambiguous turn
6. Otherwise -> error question

Design principles:
- One conversation per engine instance; the Question Store may be shared
- Deterministic: same store, same replies, same questions
- Unresolvable answers are conversational, not exceptions
- A dangling nextState is a data fault: UnknownQuestionError propagates
  and the current question is left untouched
"""

import logging
from pathlib import Path
from typing import Optional, Union

from chatbot.contracts import AnswerOption, Question, QuestionKind, TurnResult
from chatbot.core.question_store import QuestionStore
from chatbot.core.synthetic_questions import build_error_question, build_guess_question
from chatbot.utils.question_loader import load_questions

logger = logging.getLogger(__name__)


class ConversationEngine:
    """
    Troubleshooting conversation driven by a question tree.

    Example:
        >>> engine = ConversationEngine.from_file("data/troubleshooting.json")
        >>> engine.reply("")
        'What kind of problem are you facing?'
        >>> engine.reply("my internet doesn't work")
        'Have you tried resetting your router?'
    """

    def __init__(self, store: QuestionStore):
        """
        Args:
            store: Validated Question Store (not copied, never mutated)
        """
        self.store = store
        self._current_question: Optional[Question] = None

        logger.info("Conversation Engine initialized")

    @classmethod
    def from_questions(cls, questions) -> "ConversationEngine":
        """
        Build an engine from parsed question records.

        Raises:
            QuestionValidationError: Records are malformed
        """
        return cls(QuestionStore(questions))

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "ConversationEngine":
        """
        Build an engine from a JSON questions file.

        Raises:
            QuestionLoadError: File missing or not JSON
            QuestionValidationError: Records are malformed
        """
        return cls.from_questions(load_questions(file_path))

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def current_question(self) -> Optional[Question]:
        return self._current_question

    def reply(self, answer: str) -> str:
        """
        Advance the conversation with the user's answer.

        Args:
            answer: Raw answer to the current question, or an empty string
                to start (or restart a finished) conversation

        Returns:
            Text of the next question

        Raises:
            UnknownQuestionError: The matched answer option points to a
                question that does not exist
        """
        return self.handle_turn(answer).system_output

    def handle_turn(self, answer: str) -> TurnResult:
        """
        Same as reply(), returning structured turn information.

        Returns:
            TurnResult describing the resolved question
        """
        normalized = answer.strip().lower()
        next_question = self._find_next_question(normalized)
        self._current_question = next_question

        return TurnResult.from_question(next_question)

    def reset(self) -> None:
        """Forget the current question; the next empty reply starts over."""
        self._current_question = None
        logger.debug("Conversation reset")

    # =========================================================================
    # Resolution
    # =========================================================================

    def _find_next_question(self, answer: str) -> Question:
        """
        Resolve a normalized answer to the next question.

        Args:
            answer: Stripped, lowercased answer

        Returns:
            Stored question, or a synthetic error/guess question
        """
        current = self._current_question

        if self._should_start_new_conversation(answer):
            logger.info(f"Starting conversation at '{self.store.start_id}'")
            return self.store.start_question

        if not answer or current is None:
            logger.debug("No answer mid-conversation or no conversation yet")
            return build_error_question(current)

        answer_option = self._find_answer_option(answer)
        if answer_option is not None:
            logger.debug(f"Exact match '{answer_option.answer}' -> '{answer_option.next_state}'")
            return self.store.get(answer_option.next_state)

        guess_question = self._find_guess_question(answer)
        if guess_question is not None:
            logger.debug(f"Guessed answer for '{current.id}': {guess_question.question}")
            return guess_question

        logger.debug(f"Could not resolve answer to '{current.id}'")
        return build_error_question(current)

    def _should_start_new_conversation(self, answer: str) -> bool:
        current = self._current_question
        return (current is None or current.is_terminal) and not answer

    def _find_answer_option(self, answer: str) -> Optional[AnswerOption]:
        """First answer option of the current question equal to answer (case-insensitive)."""
        for option in self._current_question.answer_options:
            if option.answer.lower() == answer:
                return option
        return None

    def _find_guess_question(self, answer: str) -> Optional[Question]:
        """
        Guess which answer option the user meant.

        An option is a candidate when its answer text is contained in the
        user's answer, e.g. "my internet doesn't work at my home" contains
        "my internet doesn't work".

        Returns:
            Guess question when exactly one option is a candidate,
            None otherwise (no guessing on a guess question)
        """
        current = self._current_question

        if current.kind is QuestionKind.GUESS or current.is_terminal:
            return None

        guesses = [
            option for option in current.answer_options
            if option.answer.lower() in answer
        ]

        if len(guesses) == 1:
            return build_guess_question(current, guesses[0])

        return None
