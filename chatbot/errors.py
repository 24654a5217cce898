"""
Exception types for the conversation bot.

Load and validation errors are fatal at construction time. Each distinct
malformation has its own class and a fixed message so callers and tests can
tell causes apart. Unresolvable user answers are NOT errors - the engine
answers them with the synthetic error question instead.
"""


class QuestionLoadError(Exception):
    """Question file could not be read or is not valid JSON."""

    def __init__(self, file_path):
        self.file_path = file_path
        super().__init__(
            f"Failed to load file from {file_path}. "
            f"Please, check that file exist and is json format."
        )


class QuestionValidationError(ValueError):
    """Base class for malformed question data."""

    message = "Invalid questions."

    def __init__(self, message=None):
        super().__init__(message or self.message)


class NotAnArrayError(QuestionValidationError):
    message = "File must include array of questions."


class EmptyQuestionListError(QuestionValidationError):
    message = "File must include at least one question."


class MissingIdOrQuestionError(QuestionValidationError):
    message = "All questions must have id and question."


class AnswerOptionsNotArrayError(QuestionValidationError):
    message = "question.answerOptions must be an array."


class InvalidAnswerOptionError(QuestionValidationError):
    message = "question.answerOption must have answer and nextState."


class UnknownQuestionError(LookupError):
    """
    Requested question id is not in the store.

    Raised when an answer option's nextState points at a question that was
    never loaded (dangling reference).
    """

    def __init__(self, question_id):
        self.question_id = question_id
        super().__init__(f"Unknown question id '{question_id}'")
