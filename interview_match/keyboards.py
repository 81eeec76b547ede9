"""Inline keyboards offered to users for picking a field and level."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

CATEGORIES = (
    "Algorithms",
    "SystemDesign",
    "DataScience",
    "Frontend",
    "ML",
    "DevOps",
    "DBA",
)

PROGRAMMING_LANGUAGES = (
    "Go",
    "Cpp",
    "C",
    "C#",
    "Rust",
    "JS",
    "Java",
    "Ruby",
    "Python",
    "Kotlin",
    "Swift",
    "PHP",
)

OTHER_CATEGORIES = ("Cybersecurity", "QA")

EXPERIENCE_LEVELS = ("Intern", "Junior", "Middle", "Senior")


def inline_button(text: str, data: str) -> dict:
    """An inline keyboard button that sends ``data`` back when pressed."""
    return {"text": text, "callback_data": data}


def inline_keyboard(rows: Iterable[Iterable[dict]]) -> dict:
    """An inline keyboard markup built from rows of buttons."""
    return {"inline_keyboard": [list(row) for row in rows]}


def _chunks(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


def _category_row(names: Iterable[str]) -> list[dict]:
    return [inline_button(name, "category:" + name) for name in names]


def categories_keyboard() -> dict:
    """Categories two per row, languages three per row, then the rest."""
    rows = [_category_row(pair) for pair in _chunks(CATEGORIES, 2)]
    rows.extend(_category_row(group) for group in _chunks(PROGRAMMING_LANGUAGES, 3))
    rows.append(_category_row(OTHER_CATEGORIES))
    rows.append([inline_button("Category not found", "category:notfound")])
    return inline_keyboard(rows)


def levels_keyboard() -> dict:
    """One experience level per row."""
    return inline_keyboard([[inline_button(level, "level:" + level)] for level in EXPERIENCE_LEVELS])