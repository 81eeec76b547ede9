import json
from datetime import datetime

import pytest

from interview_match.models import QuizAnswer, QuizQuestion, QuizSession, User


def test_display_name_prefers_username():
    user = User(id=1, username="alice", first_name="Alice", last_name="Smith")
    assert user.display_name() == "@alice"


def test_display_name_full_name_without_username():
    user = User(id=1, first_name="Alice", last_name="Smith")
    assert user.display_name() == "Alice Smith"


def test_display_name_first_name_only():
    user = User(id=1, first_name="Alice")
    assert user.display_name() == user.first_name


def test_session_incomplete_at_start():
    session = QuizSession(id=1, user_id=2, language="python", question_ids=[5, 6])
    assert session.is_complete() is False


def test_session_complete_when_index_reaches_end():
    session = QuizSession(
        id=1, user_id=2, language="python", question_ids=[5, 6], current_question_index=2
    )
    assert session.is_complete() is True


def test_session_complete_when_completed_at_set():
    session = QuizSession(
        id=1, user_id=2, language="python", question_ids=[5, 6], completed_at=datetime.now()
    )
    assert session.is_complete() is True


def test_score_zero_before_any_answer():
    session = QuizSession(id=1, user_id=2, language="python", question_ids=[5], correct_answers=0)
    assert session.score() == 0.0


def test_score_is_percentage_of_answered():
    session = QuizSession(
        id=1,
        user_id=2,
        language="python",
        question_ids=[5, 6, 7],
        current_question_index=2,
        correct_answers=1,
    )
    assert session.score() == pytest.approx(50.0)


def test_score_all_correct_is_hundred():
    session = QuizSession(
        id=1,
        user_id=2,
        language="python",
        question_ids=[5, 6, 7],
        current_question_index=3,
        correct_answers=3,
    )
    assert session.score() == pytest.approx(100.0)


def test_question_ids_json_is_compact():
    session = QuizSession(id=1, user_id=2, language="python", question_ids=[1, 2, 3])
    assert session.question_ids_json() == "[1,2,3]"


def test_question_ids_round_trip():
    original = QuizSession(id=1, user_id=2, language="python", question_ids=[9, 4, 17])
    restored = QuizSession(id=1, user_id=2, language="python")
    restored.load_question_ids(original.question_ids_json())
    assert restored.question_ids == original.question_ids
    assert json.loads(original.question_ids_json()) == original.question_ids


def test_load_question_ids_null_gives_empty_list():
    session = QuizSession(id=1, user_id=2, language="python", question_ids=[1])
    session.load_question_ids("null")
    assert session.question_ids == []


@pytest.mark.parametrize("text", ["{\"a\": 1}", "[\"x\"]", "not json", "[true]"])
def test_load_question_ids_rejects_bad_input(text):
    session = QuizSession(id=1, user_id=2, language="python")
    with pytest.raises(ValueError):
        session.load_question_ids(text)


def test_question_and_answer_hold_their_fields():
    question = QuizQuestion(
        id=3,
        language="python",
        question_text="Q?",
        answer_options=["a", "b"],
        correct_answer="b",
    )
    answer = QuizAnswer(
        id=1, user_id=2, session_id=4, question_id=question.id, answer_given="b", is_correct=True
    )
    assert answer.question_id == question.id
    assert question.answer_options[1] == question.correct_answer
    assert question.created_at is None