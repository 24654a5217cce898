"""
Question file loader

Reads a UTF-8 JSON file of questions and returns the parsed data untouched.
Validation is left to the Question Store.

Relative paths are resolved against the current working directory.
Every read or parse failure is reported as QuestionLoadError with the
message existing callers expect:
    "Failed to load file from <path>. Please, check that file exist and is json format."
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from chatbot.errors import QuestionLoadError

logger = logging.getLogger(__name__)


def load_questions(file_path: Union[str, Path]) -> Any:
    """
    Load and parse a questions file.

    Args:
        file_path: Path to the JSON file, relative to the working directory
            or absolute

    Returns:
        Parsed JSON content (expected to be a list of question dicts)

    Raises:
        QuestionLoadError: File missing, unreadable, not UTF-8 or not JSON
    """
    path = Path.cwd() / Path(file_path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            questions = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load questions from {path}: {e}")
        raise QuestionLoadError(file_path) from e

    logger.info(f"Loaded questions file: {path}")
    return questions
