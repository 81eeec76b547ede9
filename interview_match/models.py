"""Data models for users, quiz questions, sessions and answers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """A bot user together with the interview criteria they picked."""

    id: int
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    field: str = ""
    level: str = ""

    def display_name(self) -> str:
        """Return the handle if there is one, otherwise the person's name."""
        if self.username:
            return "@" + self.username
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


@dataclass
class QuizQuestion:
    """A single multiple-choice quiz question."""

    id: int
    language: str
    question_text: str
    answer_options: list[str]
    correct_answer: str
    category: str = ""
    difficulty: str = ""
    explanation: str = ""
    created_at: Optional[datetime] = None


@dataclass
class QuizSession:
    """A user's run through a fixed list of quiz questions."""

    id: int
    user_id: int
    language: str
    question_ids: list[int] = field(default_factory=list)
    current_question_index: int = 0
    correct_answers: int = 0
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    def is_complete(self) -> bool:
        """True once every question is answered or the session was closed."""
        return (
            self.current_question_index >= len(self.question_ids)
            or self.completed_at is not None
        )

    def score(self) -> float:
        """Percentage of answered questions that were answered correctly."""
        if self.current_question_index == 0:
            return 0.0
        return self.correct_answers / self.current_question_index * 100

    def question_ids_json(self) -> str:
        """Serialise the question ids as a compact JSON array."""
        return json.dumps(list(self.question_ids), separators=(",", ":"))

    def load_question_ids(self, text: str) -> None:
        """Replace the question ids with those in a JSON array."""
        data = json.loads(text)
        if data is None:
            self.question_ids = []
            return
        if not isinstance(data, list) or not all(
            isinstance(item, int) and not isinstance(item, bool) for item in data
        ):
            raise ValueError("question ids must be a JSON array of integers")
        self.question_ids = data


@dataclass
class QuizAnswer:
    """A recorded answer to one question of a session."""

    id: int
    user_id: int
    session_id: int
    question_id: int
    answer_given: str
    is_correct: bool
    answered_at: datetime = field(default_factory=datetime.now)