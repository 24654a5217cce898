"""
Test question file loading and its failure message
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json

import pytest

from chatbot.core.conversation_engine import ConversationEngine
from chatbot.errors import (
    AnswerOptionsNotArrayError,
    InvalidAnswerOptionError,
    MissingIdOrQuestionError,
    NotAnArrayError,
    QuestionLoadError,
)
from chatbot.utils.question_loader import load_questions


def load_error_message(path):
    return f"Failed to load file from {path}. Please, check that file exist and is json format."


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(QuestionLoadError) as exc_info:
        load_questions("./data/missing.json")

    assert str(exc_info.value) == load_error_message("./data/missing.json")
    assert isinstance(exc_info.value.__cause__, OSError)


def test_invalid_json(tmp_path):
    path = tmp_path / "troubleshootingInvalidJson.json"
    path.write_text('[{"id": "start", "question": ', encoding='utf-8')

    with pytest.raises(QuestionLoadError) as exc_info:
        load_questions(str(path))

    assert str(exc_info.value) == load_error_message(str(path))


def test_not_utf8(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes('[{"id": "café"}]'.encode('latin-1'))

    with pytest.raises(QuestionLoadError):
        load_questions(path)


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(QuestionLoadError):
        load_questions(tmp_path)


def test_relative_path_resolves_against_working_directory(tmp_path, monkeypatch):
    (tmp_path / "data").mkdir()
    write_json(tmp_path / "data" / "questions.json", [{"id": "start", "question": "Hi?"}])
    monkeypatch.chdir(tmp_path)

    assert load_questions("data/questions.json") == [{"id": "start", "question": "Hi?"}]


def test_loader_does_not_validate(tmp_path):
    path = write_json(tmp_path / "object.json", {"id": "start"})

    assert load_questions(path) == {"id": "start"}


@pytest.mark.parametrize("data, error_type", [
    ({"id": "start", "question": "Hi?"}, NotAnArrayError),
    ([{"id": "start"}], MissingIdOrQuestionError),
    ([{"id": "start", "question": "Hi?", "answerOptions": {"answer": "Yes"}}], AnswerOptionsNotArrayError),
    ([{"id": "start", "question": "Hi?", "answerOptions": [{"answer": "Yes"}]}], InvalidAnswerOptionError),
])
def test_engine_from_malformed_file(tmp_path, data, error_type):
    path = write_json(tmp_path / "questions.json", data)

    with pytest.raises(error_type):
        ConversationEngine.from_file(path)


def test_engine_from_well_formed_file(tmp_path):
    path = write_json(tmp_path / "questions.json", [
        {"id": "start", "question": "Hi?", "answerOptions": [{"answer": "Bye", "nextState": "end"}]},
        {"id": "end", "question": "Bye!"},
    ])

    engine = ConversationEngine.from_file(path)

    assert engine.reply("") == "Hi?"
    assert engine.reply("bye") == "Bye!"
