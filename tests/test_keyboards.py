from interview_match.keyboards import (
    CATEGORIES,
    EXPERIENCE_LEVELS,
    OTHER_CATEGORIES,
    PROGRAMMING_LANGUAGES,
    categories_keyboard,
    inline_button,
    inline_keyboard,
    levels_keyboard,
)


def _flat(markup):
    return [button for row in markup["inline_keyboard"] for button in row]


def test_inline_button_shape():
    assert inline_button("Go", "category:Go") == {"text": "Go", "callback_data": "category:Go"}


def test_inline_keyboard_wraps_rows():
    button = inline_button("A", "a")
    assert inline_keyboard([[button], (button, button)]) == {
        "inline_keyboard": [[button], [button, button]]
    }


def test_categories_keyboard_lists_every_option_in_order():
    texts = [button["text"] for button in _flat(categories_keyboard())]
    expected = (
        list(CATEGORIES)
        + list(PROGRAMMING_LANGUAGES)
        + list(OTHER_CATEGORIES)
        + ["Category not found"]
    )
    assert texts == expected


def test_categories_keyboard_callback_data():
    buttons = _flat(categories_keyboard())
    for button in buttons[:-1]:
        assert button["callback_data"] == "category:" + button["text"]
    assert buttons[-1] == inline_button("Category not found", "category:notfound")


def test_categories_keyboard_row_sizes():
    rows = categories_keyboard()["inline_keyboard"]
    category_rows = (len(CATEGORIES) + 1) // 2
    language_rows = (len(PROGRAMMING_LANGUAGES) + 2) // 3
    assert all(len(row) <= 2 for row in rows[:category_rows])
    assert all(
        len(row) <= 3 for row in rows[category_rows : category_rows + language_rows]
    )
    assert len(rows) == category_rows + language_rows + 2
    assert [b["text"] for b in rows[-2]] == list(OTHER_CATEGORIES)


def test_levels_keyboard_one_per_row():
    rows = levels_keyboard()["inline_keyboard"]
    assert [len(row) for row in rows] == [1] * len(EXPERIENCE_LEVELS)
    assert [row[0]["callback_data"] for row in rows] == [
        "level:" + level for level in EXPERIENCE_LEVELS
    ]