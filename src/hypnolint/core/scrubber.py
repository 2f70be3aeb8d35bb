"""Blank out string literals and comments without moving any offsets.

The scrubbed copy has exactly the length and the line breaks of the input, so
positions found in it index straight back into the original text. String
delimiters survive; their contents, and comments including their markers,
become ``FILLER``.
"""

from dataclasses import dataclass
from enum import Enum

FILLER = " "


class LexState(Enum):
    CODE = "code"
    STRING = "string"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"


@dataclass(frozen=True)
class ScrubResult:
    text: str
    # Lexer state at the first character of every line; len == number of lines.
    line_states: tuple[LexState, ...]


def _blank(ch: str) -> str:
    return ch if ch == "\r" else FILLER


def scan(text: str) -> ScrubResult:
    out = list(text)
    line_states = [LexState.CODE]
    state = LexState.CODE
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]
        if ch == "\n":
            if state is LexState.LINE_COMMENT:
                state = LexState.CODE
            line_states.append(state)
            i += 1
            continue

        if state is LexState.CODE:
            if ch == '"':
                state = LexState.STRING
            elif text.startswith("//", i):
                state = LexState.LINE_COMMENT
                out[i] = out[i + 1] = FILLER
                i += 2
                continue
            elif text.startswith("/*", i):
                state = LexState.BLOCK_COMMENT
                out[i] = out[i + 1] = FILLER
                i += 2
                continue
        elif state is LexState.STRING:
            if ch == "\\":
                out[i] = FILLER
                if i + 1 < n and text[i + 1] != "\n":
                    out[i + 1] = _blank(text[i + 1])
                    i += 2
                    continue
            elif ch == '"':
                state = LexState.CODE
            else:
                out[i] = _blank(ch)
        elif state is LexState.BLOCK_COMMENT and text.startswith("*/", i):
            out[i] = out[i + 1] = FILLER
            state = LexState.CODE
            i += 2
            continue
        else:
            out[i] = _blank(ch)
        i += 1

    return ScrubResult(text="".join(out), line_states=tuple(line_states))


def scrub(text: str) -> str:
    return scan(text).text
