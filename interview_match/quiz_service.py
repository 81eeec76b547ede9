"""Quiz storage backed by a DB-API 2 database connection."""

from __future__ import annotations

import json
from contextlib import closing, contextmanager
from datetime import datetime
from typing import Any, Iterator, Optional, Sequence

from .models import QuizQuestion, QuizSession

_QUESTION_COLUMNS = (
    "id, language, category, difficulty, question_text, "
    "answer_options, correct_answer, explanation, created_at"
)


class QuizServiceError(Exception):
    """Raised when a quiz database operation fails."""


class QuestionNotFoundError(QuizServiceError):
    """Raised when a question id does not exist."""


@contextmanager
def _wrapped(message: str) -> Iterator[None]:
    try:
        yield
    except QuizServiceError:
        raise
    except Exception as exc:
        raise QuizServiceError(f"{message}: {exc}") from exc


def _as_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, bytes):
        value = value.decode()
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise QuizServiceError(f"unexpected timestamp value: {value!r}")


def _as_json(value: Any) -> Any:
    if isinstance(value, (bytes, str)):
        return json.loads(value)
    return value


def _question_from_row(row: Sequence[Any]) -> QuizQuestion:
    (qid, language, category, difficulty, text, options, correct, explanation, created) = row
    with _wrapped("error unmarshaling answer options"):
        parsed = _as_json(options)
        if parsed is None:
            parsed = []
        if not isinstance(parsed, list):
            raise ValueError("answer options are not a JSON array")
    return QuizQuestion(
        id=qid,
        language=language,
        category=category or "",
        difficulty=difficulty or "",
        question_text=text,
        answer_options=[str(option) for option in parsed],
        correct_answer=correct,
        explanation=explanation or "",
        created_at=_as_datetime(created),
    )


class QuizService:
    """Reads quiz questions and tracks sessions and answers in the database.

    ``paramstyle`` is that of the DB-API driver behind ``connection``:
    ``qmark``, ``format``, ``pyformat`` or ``numeric``.
    """

    def __init__(self, connection: Any, paramstyle: str = "qmark") -> None:
        if paramstyle not in ("qmark", "format", "pyformat", "numeric"):
            raise ValueError(f"unsupported paramstyle: {paramstyle}")
        self._conn = connection
        self._paramstyle = paramstyle

    def _sql(self, query: str) -> str:
        if self._paramstyle == "qmark":
            return query
        pieces = query.split("?")
        if self._paramstyle in ("format", "pyformat"):
            return "%s".join(pieces)
        out = [pieces[0]]
        for number, piece in enumerate(pieces[1:], start=1):
            out.append(f":{number}{piece}")
        return "".join(out)

    def _fetchall(self, query: str, params: Sequence[Any] = ()) -> list[Sequence[Any]]:
        with closing(self._conn.cursor()) as cursor:
            cursor.execute(self._sql(query), tuple(params))
            return list(cursor.fetchall())

    def _fetchone(self, query: str, params: Sequence[Any] = ()) -> Optional[Sequence[Any]]:
        with closing(self._conn.cursor()) as cursor:
            cursor.execute(self._sql(query), tuple(params))
            return cursor.fetchone()

    def _execute(self, query: str, params: Sequence[Any] = ()) -> None:
        with closing(self._conn.cursor()) as cursor:
            cursor.execute(self._sql(query), tuple(params))
        self._conn.commit()

    def questions_by_language(self, language: str, limit: int) -> list[QuizQuestion]:
        """Return up to ``limit`` randomly chosen questions for a language."""
        with _wrapped("error querying questions"):
            rows = self._fetchall(
                f"SELECT {_QUESTION_COLUMNS} FROM quiz_questions "
                "WHERE language = ? ORDER BY RANDOM() LIMIT ?",
                (language, limit),
            )
        return [_question_from_row(row) for row in rows]

    def question_by_id(self, question_id: int) -> QuizQuestion:
        """Return the question with this id."""
        with _wrapped("error querying question"):
            row = self._fetchone(
                f"SELECT {_QUESTION_COLUMNS} FROM quiz_questions WHERE id = ?",
                (question_id,),
            )
        if row is None:
            raise QuestionNotFoundError(f"question not found: {question_id}")
        return _question_from_row(row)

    def create_session(
        self, user_id: int, language: str, question_ids: Sequence[int]
    ) -> QuizSession:
        """Open a new session for a user over the given questions."""
        ids = list(question_ids)
        with _wrapped("error creating quiz session"):
            with closing(self._conn.cursor()) as cursor:
                cursor.execute(
                    self._sql(
                        "INSERT INTO user_quiz_sessions (user_id, language, question_ids) "
                        "VALUES (?, ?, ?) RETURNING id, started_at"
                    ),
                    (user_id, language, json.dumps(ids, separators=(",", ":"))),
                )
                session_id, started_at = cursor.fetchone()
            self._conn.commit()
        return QuizSession(
            id=session_id,
            user_id=user_id,
            language=language,
            question_ids=ids,
            started_at=_as_datetime(started_at) or datetime.now(),
        )

    def active_session(self, user_id: int) -> Optional[QuizSession]:
        """Return the user's latest unfinished session, or None."""
        with _wrapped("error querying active session"):
            row = self._fetchone(
                "SELECT id, user_id, language, current_question_index, question_ids, "
                "correct_answers, started_at, completed_at FROM user_quiz_sessions "
                "WHERE user_id = ? AND completed_at IS NULL "
                "ORDER BY started_at DESC LIMIT 1",
                (user_id,),
            )
        if row is None:
            return None
        sid, uid, language, index, ids, correct, started, completed = row
        session = QuizSession(
            id=sid,
            user_id=uid,
            language=language,
            current_question_index=index,
            correct_answers=correct,
            started_at=_as_datetime(started) or datetime.now(),
            completed_at=_as_datetime(completed),
        )
        with _wrapped("error unmarshaling question IDs"):
            if isinstance(ids, (str, bytes)):
                session.load_question_ids(ids.decode() if isinstance(ids, bytes) else ids)
            else:
                session.load_question_ids(json.dumps(ids))
        return session

    def record_answer(
        self,
        user_id: int,
        session_id: int,
        question_id: int,
        answer_given: str,
        is_correct: bool,
    ) -> None:
        """Store an answer, counting it on the session when correct."""
        with _wrapped("error recording answer"):
            self._execute(
                "INSERT INTO user_quiz_answers "
                "(user_id, session_id, question_id, answer_given, is_correct) "
                "VALUES (?, ?, ?, ?, ?)",
                (user_id, session_id, question_id, answer_given, bool(is_correct)),
            )
        if is_correct:
            with _wrapped("error updating correct answers"):
                self._execute(
                    "UPDATE user_quiz_sessions SET correct_answers = correct_answers + 1 "
                    "WHERE id = ?",
                    (session_id,),
                )

    def advance_session(self, session_id: int) -> None:
        """Move the session on to its next question."""
        with _wrapped("error advancing quiz session"):
            self._execute(
                "UPDATE user_quiz_sessions "
                "SET current_question_index = current_question_index + 1 WHERE id = ?",
                (session_id,),
            )

    def complete_session(self, session_id: int) -> None:
        """Mark the session as finished now."""
        with _wrapped("error completing quiz session"):
            self._execute(
                "UPDATE user_quiz_sessions SET completed_at = CURRENT_TIMESTAMP WHERE id = ?",
                (session_id,),
            )

    def languages(self) -> list[str]:
        """Return every language that has questions, sorted."""
        with _wrapped("error querying languages"):
            rows = self._fetchall(
                "SELECT DISTINCT language FROM quiz_questions ORDER BY language"
            )
        return [row[0] for row in rows]

    def user_stats(self, user_id: int) -> dict[str, dict[str, int]]:
        """Return per-language totals over the user's completed sessions."""
        with _wrapped("error querying user stats"):
            rows = self._fetchall(
                "SELECT q.language, COUNT(DISTINCT s.id), COUNT(a.id), "
                "SUM(CASE WHEN a.is_correct THEN 1 ELSE 0 END) "
                "FROM user_quiz_sessions s "
                "JOIN user_quiz_answers a ON s.id = a.session_id "
                "JOIN quiz_questions q ON a.question_id = q.id "
                "WHERE s.user_id = ? AND s.completed_at IS NOT NULL "
                "GROUP BY q.language",
                (user_id,),
            )
        return {
            language: {
                "completed_quizzes": int(completed or 0),
                "total_questions": int(total or 0),
                "correct_answers": int(correct or 0),
            }
            for language, completed, total, correct in rows
        }