"""A small string type with explicit length and editing operations."""

from __future__ import annotations


class MyString:
    """Sequence of characters supporting substring, insertion and search."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, init: str | MyString = "") -> None:
        self._text = str(init)

    def is_empty(self) -> bool:
        """Return True if the string holds no characters."""
        return len(self._text) == 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MyString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __len__(self) -> int:
        return len(self._text)

    def resize(self, new_size: int) -> None:
        """Truncate to ``new_size`` characters, or pad with NUL characters."""
        if new_size < 0:
            raise ValueError("size must be non-negative")
        if new_size <= len(self._text):
            self._text = self._text[:new_size]
        else:
            self._text += "\0" * (new_size - len(self._text))

    def substr(self, start: int, num: int) -> MyString:
        """Return ``num`` characters beginning at index ``start``."""
        if start < 0 or num < 0 or start + num > len(self._text):
            raise ValueError("substring range outside the string")
        return MyString(self._text[start:start + num])

    def concat(self, other: MyString | str) -> MyString:
        """Return a new string with ``other`` appended."""
        return self.insert(other, len(self._text))

    def insert(self, target: MyString | str, start: int) -> MyString:
        """Return a new string with ``target`` inserted before index ``start``."""
        if not 0 <= start <= len(self._text):
            raise IndexError(f"insert position {start} out of range")
        text = str(target)
        return MyString(self._text[:start] + text + self._text[start:])

    def find(self, pattern: MyString | str) -> int:
        """Return the first index where ``pattern`` occurs, or -1."""
        if not self._text:
            return -1
        return self._text.find(str(pattern))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MyString({self._text!r})"