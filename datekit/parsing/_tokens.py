"""Tokenizer for loosely formatted date strings.

Any run of characters that is neither a letter nor a digit is a
delimiter, so "2016-02/29", "2016.02.29" and "29 Feb, 2016" all split
cleanly. Letters and digits written together ("18th", "18T13") are split
into separate tokens.

Internal module - use parse() from datekit.parsing instead.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from datekit.units.locale import LocaleNames

_TOKEN_PATTERN = re.compile(r"\d+|[^\W\d_]+")


class Token(NamedTuple):
    """A token and its position in the input."""

    text: str
    start: int
    end: int

    @property
    def is_digit(self) -> bool:
        return self.text.isdecimal()


def tokenize(text: str, locale: LocaleNames) -> list[Token]:
    """Split text into value tokens, dropping decorative words.

    Dropped tokens:
        - a "T" written directly between two numbers (ISO 8601 separator)
        - an ordinal suffix written directly after a number ("18th")
        - weekday names that are not also month names

    Examples:
        >>> from datekit.units.locale import ENGLISH
        >>> [t.text for t in tokenize("Monday, 18th Feb 2019", ENGLISH)]
        ['18', 'Feb', '2019']
    """
    return scan(text, locale)[0]


def scan(text: str, locale: LocaleNames) -> tuple[list[Token], list[int]]:
    """Tokenize text and also return the ISO weekdays its weekday names state.

    Examples:
        >>> from datekit.units.locale import ENGLISH
        >>> scan("Tue 19 Feb 2019", ENGLISH)[1]
        [2]
    """
    raw = [Token(m.group(), m.start(), m.end()) for m in _TOKEN_PATTERN.finditer(text)]
    tokens: list[Token] = []
    weekdays: list[int] = []
    for index, token in enumerate(raw):
        if token.is_digit:
            tokens.append(token)
            continue

        previous = raw[index - 1] if index > 0 else None
        following = raw[index + 1] if index + 1 < len(raw) else None
        glued_after_number = (
            previous is not None and previous.is_digit and previous.end == token.start
        )

        if (
            token.text in ("T", "t")
            and glued_after_number
            and following is not None
            and following.is_digit
            and following.start == token.end
        ):
            continue
        if glued_after_number and locale.is_ordinal_suffix(token.text):
            continue
        if locale.month_number(token.text) is None:
            weekday = locale.weekday_number(token.text)
            if weekday is not None:
                weekdays.append(weekday)
                continue
        tokens.append(token)
    return tokens, weekdays


__all__ = ["Token", "scan", "tokenize"]
