from bisect import bisect_right
from functools import cached_property

from hypnolint.core.scrubber import LexState, scan
from hypnolint.models import Position, TextRange


class InvalidDocumentError(TypeError):
    """Raised when something other than document text is handed to the engine."""


def require_text(text: object) -> str:
    if not isinstance(text, str):
        raise InvalidDocumentError(f"Document text must be str, got {type(text).__name__}")
    return text


class SourceDocument:
    """Read-only view of one document's text: lines, offsets and the scrubbed copy."""

    def __init__(self, text: str) -> None:
        self.text = require_text(text)
        self.lines: tuple[str, ...] = tuple(self.text.split("\n"))
        starts = [0]
        for line in self.lines[:-1]:
            starts.append(starts[-1] + len(line) + 1)
        self._line_starts = starts

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @cached_property
    def _scrubbed(self) -> tuple[str, tuple[LexState, ...]]:
        result = scan(self.text)
        return result.text, result.line_states

    @property
    def scrubbed(self) -> str:
        return self._scrubbed[0]

    @cached_property
    def scrubbed_lines(self) -> tuple[str, ...]:
        return tuple(self.scrubbed.split("\n"))

    @property
    def line_states(self) -> tuple[LexState, ...]:
        return self._scrubbed[1]

    def line_start(self, line: int) -> int:
        return self._line_starts[line]

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line=line, column=offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        line = min(position.line, self.line_count - 1)
        column = min(position.column, len(self.lines[line]))
        return self._line_starts[line] + column

    def range_at(self, offset: int, width: int) -> TextRange:
        start = self.position_at(offset)
        end = self.position_at(offset + width)
        if end.line != start.line:
            end = Position(line=start.line, column=len(self.lines[start.line]))
        return TextRange(start=start, end=end)

    def end_of_line(self, line: int) -> TextRange:
        return TextRange.at(line, len(self.lines[line]))
