"""Row tokenizer for TOON data lines.

A data line is a comma-separated list of values in which a backslash
escapes the next character. Scanning is a two-state machine driven by a
transition table keyed on ``(state, character class)``:

    NORMAL  + backslash -> ESCAPED  (backslash dropped)
    NORMAL  + comma     -> NORMAL   (token boundary)
    NORMAL  + other     -> NORMAL   (append character)
    ESCAPED + any       -> NORMAL   (append unescaped character)

Unknown escapes (``\\x``) append the character verbatim instead of failing.
A line with N unescaped commas always yields N + 1 tokens.
"""

from enum import Enum

from toonbridge.constants import ESCAPE_CHAR, ESCAPE_SEQUENCES, FIELD_SEPARATOR


class ScanState(Enum):
    """Tokenizer states."""

    NORMAL = "normal"
    ESCAPED = "escaped"


class CharClass(Enum):
    """Character classes the transition table distinguishes."""

    BACKSLASH = "backslash"
    COMMA = "comma"
    OTHER = "other"


class Action(Enum):
    """What to do with the current character."""

    APPEND = "append"
    SPLIT = "split"
    SKIP = "skip"
    UNESCAPE = "unescape"


TRANSITIONS: dict[tuple[ScanState, CharClass], tuple[ScanState, Action]] = {
    (ScanState.NORMAL, CharClass.BACKSLASH): (ScanState.ESCAPED, Action.SKIP),
    (ScanState.NORMAL, CharClass.COMMA): (ScanState.NORMAL, Action.SPLIT),
    (ScanState.NORMAL, CharClass.OTHER): (ScanState.NORMAL, Action.APPEND),
    (ScanState.ESCAPED, CharClass.BACKSLASH): (ScanState.NORMAL, Action.UNESCAPE),
    (ScanState.ESCAPED, CharClass.COMMA): (ScanState.NORMAL, Action.UNESCAPE),
    (ScanState.ESCAPED, CharClass.OTHER): (ScanState.NORMAL, Action.UNESCAPE),
}


def classify_char(char: str) -> CharClass:
    if char == ESCAPE_CHAR:
        return CharClass.BACKSLASH
    if char == FIELD_SEPARATOR:
        return CharClass.COMMA
    return CharClass.OTHER


def tokenize_row(line: str) -> list[str]:
    """Split a data line into unescaped value tokens.

    The line is used as given; callers strip indentation first.
    A dangling backslash at the end of the line is dropped.

    Examples:
        >>> tokenize_row("1,Alice,admin")
        ['1', 'Alice', 'admin']
        >>> tokenize_row(r"a\\,b,c\\nd")
        ['a,b', 'c\\nd']
        >>> tokenize_row("a,,")
        ['a', '', '']
    """
    tokens: list[str] = []
    current: list[str] = []
    state = ScanState.NORMAL

    for char in line:
        state, action = TRANSITIONS[(state, classify_char(char))]
        if action is Action.APPEND:
            current.append(char)
        elif action is Action.SPLIT:
            tokens.append("".join(current))
            current = []
        elif action is Action.UNESCAPE:
            current.append(ESCAPE_SEQUENCES.get(char, char))
        # Action.SKIP: the escape character itself is never emitted

    tokens.append("".join(current))
    return tokens
