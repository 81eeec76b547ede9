# interview-match

Building blocks for a Telegram bot with two jobs:

- **Finding interview partners.** A user picks a field (Algorithms, SystemDesign,
  Frontend, a programming language, and so on) and an experience level (Intern,
  Junior, Middle, Senior). Users who chose the same field and level can be
  found with `UserStore.find_matches`.
- **Practice quizzes.** Multiple-choice questions per programming language are
  read from a database, and quiz sessions and answers are stored there, along
  with per-language statistics for each user.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `interview_match.models` – dataclasses `User`, `QuizQuestion`, `QuizSession`
  and `QuizAnswer`. `User.display_name()` gives `@username` when there is one,
  otherwise the first and last name. `QuizSession.is_complete()`,
  `QuizSession.score()` (percentage of answered questions that were right),
  `QuizSession.question_ids_json()` and `QuizSession.load_question_ids(text)`.
- `interview_match.userstore` – `UserStore`, an in-memory, thread-safe store with
  `save`, `get`, `find_matches`, `set_field` and `set_level`.
- `interview_match.quiz_service` – `QuizService` over any DB-API 2 connection.
  Pass the driver's `paramstyle` (`qmark`, `format`, `pyformat` or `numeric`;
  `qmark` by default). Methods: `questions_by_language`, `question_by_id`,
  `create_session`, `active_session`, `record_answer`, `advance_session`,
  `complete_session`, `languages` and `user_stats`. Failures raise
  `QuizServiceError`; a missing question raises `QuestionNotFoundError`.
- `interview_match.keyboards` – inline keyboard markup as plain dicts:
  `inline_button`, `inline_keyboard`, `categories_keyboard` and
  `levels_keyboard`, with the choices in `CATEGORIES`,
  `PROGRAMMING_LANGUAGES`, `OTHER_CATEGORIES` and `EXPERIENCE_LEVELS`.
- `interview_match.telegram` – `TelegramAPI`, a small Bot API client with
  `get_me`, `get_updates`, `iter_updates` (long polling that retries after
  failed polls), `send_message` and `answer_callback_query`. API and network
  failures raise `TelegramError`, which carries the API's `error_code` when
  there is one. Setting `debug` logs each call and response.

## The quiz database

`QuizService` expects three tables:

- `quiz_questions` – `id`, `language`, `category`, `difficulty`,
  `question_text`, `answer_options` (a JSON array), `correct_answer`,
  `explanation`, `created_at`
- `user_quiz_sessions` – `id`, `user_id`, `language`,
  `current_question_index`, `question_ids` (a JSON array), `correct_answers`,
  `started_at`, `completed_at`
- `user_quiz_answers` – `id`, `user_id`, `session_id`, `question_id`,
  `answer_given`, `is_correct`

Sessions are created with `INSERT ... RETURNING id, started_at`, so the
database must support `RETURNING`.

## Example

```python
from interview_match.models import User
from interview_match.userstore import UserStore

store = UserStore()
store.save(User(id=1, username="alice", first_name="Alice", field="Go", level="Junior"))
store.save(User(id=2, username="", first_name="Bob", field="Go", level="Junior"))

for match in store.find_matches(1, "Go", "Junior"):
    print(match.display_name())   # Bob
```

## What this package does not do

There is no command that starts a bot, and nothing here handles chat commands
such as `/start`, `/help` or `/prepare`, drives the quiz conversation, or
notifies matched users. The package supplies the models, the user store, the
quiz storage, the keyboards and the Bot API client; wiring them into a running
bot is left to the caller. Users in `UserStore` are kept in memory only.