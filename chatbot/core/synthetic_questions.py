"""
Synthetic question constructors

Builds the two questions the engine fabricates at runtime. Neither is ever
stored in the Question Store.

- Error question: shown when an answer cannot be resolved. Offers the
  answer options of the question that produced it so the user can retry.
- Guess question: confirmation asked when exactly one answer option is
  contained in the user's reply. "Yes" follows the guessed option,
  "No" returns to the question that produced the guess.

Synthetic ids ("error", "guess") are never resolvable through the store, so
every synthetic question remembers the stored question it derives from in
origin_id. A guess made against an error question therefore declines back
to the stored question the error was raised for.
"""

from typing import Optional

from chatbot.contracts import AnswerOption, Question, QuestionKind

ERROR_QUESTION_ID = "error"
GUESS_QUESTION_ID = "guess"

ERROR_QUESTION_TEXT = "Sorry, I did't understand. Please, try again."
GUESS_QUESTION_TEMPLATE = "Did you mean '{answer}'?"

CONFIRM_ANSWER = "Yes"
DECLINE_ANSWER = "No"


def origin_of(question: Optional[Question]) -> Optional[str]:
    """Id of the stored question behind question (itself, if stored)."""
    if question is None:
        return None
    if question.is_synthetic:
        return question.origin_id
    return question.id


def build_error_question(source: Optional[Question]) -> Question:
    """
    Build the error question for an unresolved answer.

    Args:
        source: Question the unresolved answer was given to, or None when
            the conversation has not started yet

    Returns:
        Question of kind ERROR carrying source's answer options (none if
        source is None or terminal)
    """
    return Question(
        id=ERROR_QUESTION_ID,
        question=ERROR_QUESTION_TEXT,
        answer_options=source.answer_options if source is not None else (),
        kind=QuestionKind.ERROR,
        origin_id=origin_of(source),
    )


def build_guess_question(source: Question, guessed: AnswerOption) -> Question:
    """
    Build the confirmation question for a guessed answer option.

    Args:
        source: Question the guess was made against
        guessed: The single answer option contained in the user's reply

    Returns:
        Question of kind GUESS with exactly two options:
        Yes -> guessed.next_state, No -> the stored question behind source
    """
    origin_id = origin_of(source)
    return Question(
        id=GUESS_QUESTION_ID,
        question=GUESS_QUESTION_TEMPLATE.format(answer=guessed.answer),
        answer_options=(
            AnswerOption(answer=CONFIRM_ANSWER, next_state=guessed.next_state),
            AnswerOption(answer=DECLINE_ANSWER, next_state=origin_id),
        ),
        kind=QuestionKind.GUESS,
        origin_id=origin_id,
    )
