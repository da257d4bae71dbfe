"""Stack-based solutions to bracket problems."""

from __future__ import annotations

_CLOSING = {"(": ")", "[": "]", "{": "}"}


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer and
    must match the most recent unclosed opening bracket.
    """
    stack: list[str] = []
    for char in s:
        if char in _CLOSING:
            stack.append(char)
        elif not stack or _CLOSING[stack.pop()] != char:
            return False
    return not stack