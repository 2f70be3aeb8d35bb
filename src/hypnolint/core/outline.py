import re
from dataclasses import dataclass

from hypnolint.core.document import SourceDocument, require_text
from hypnolint.models import DocumentSymbol, FoldingRange, Position, SymbolKind, TextRange

_NAME = r"([^\W\d]\w*)"


@dataclass(frozen=True)
class _BlockRule:
    pattern: re.Pattern[str]
    kind: SymbolKind
    detail: str
    fixed_name: str | None = None


_FOCUS = _BlockRule(re.compile(r"^\s*(Focus)\b"), SymbolKind.MODULE, "Focus block", "Focus")
_SESSION = _BlockRule(re.compile(rf"^\s*session\s+{_NAME}"), SymbolKind.CLASS, "session")
_TRANCEIFY = _BlockRule(re.compile(rf"^\s*tranceify\s+{_NAME}"), SymbolKind.STRUCT, "tranceify")
_SUGGESTION = _BlockRule(re.compile(rf"^\s*suggestion\s+{_NAME}"), SymbolKind.METHOD, "suggestion")
_TRIGGER = _BlockRule(re.compile(rf"^\s*trigger\s+{_NAME}"), SymbolKind.EVENT, "trigger")
_DEEP_FOCUS = _BlockRule(re.compile(r"^\s*(deepFocus)\b"), SymbolKind.NAMESPACE, "block", "deepFocus")

_TOP_LEVEL_RULES = (_FOCUS, _SESSION, _TRANCEIFY, _SUGGESTION, _TRIGGER, _DEEP_FOCUS)
_MEMBER_RULES = (_SUGGESTION, _TRIGGER)


def _block_end_line(document: SourceDocument, line: int, column: int) -> int:
    """Line of the ``}`` closing the first ``{`` at or after (line, column)."""
    code = document.scrubbed
    start = code.find("{", document.line_start(line) + column)
    if start < 0:
        return line
    depth = 0
    for offset in range(start, len(code)):
        if code[offset] == "{":
            depth += 1
        elif code[offset] == "}":
            depth -= 1
            if depth == 0:
                return document.position_at(offset).line
    return document.line_count - 1


def _match(document: SourceDocument, line: int, rules: tuple[_BlockRule, ...]) -> DocumentSymbol | None:
    text = document.scrubbed_lines[line]
    for rule in rules:
        found = rule.pattern.match(text)
        if found is None:
            continue
        name = rule.fixed_name or found.group(1)
        name_column = found.start(1)
        end_line = _block_end_line(document, line, name_column)
        return DocumentSymbol(
            name=name,
            detail=rule.detail,
            kind=rule.kind,
            range=TextRange(
                start=Position(line=line, column=0),
                end=Position(line=end_line, column=len(document.lines[end_line])),
            ),
            selection_range=TextRange.at(line, name_column, len(name)),
        )
    return None


def _consumes_body(symbol: DocumentSymbol) -> bool:
    # Focus does not swallow its body: blocks inside it are listed beside it.
    return symbol.kind is not SymbolKind.MODULE


def _collect(document: SourceDocument, first: int, stop: int, rules: tuple[_BlockRule, ...]) -> list[DocumentSymbol]:
    symbols: list[DocumentSymbol] = []
    line = first
    while line < stop:
        symbol = _match(document, line, rules)
        if symbol is None:
            line += 1
            continue
        if symbol.kind is SymbolKind.CLASS:
            symbol.children = _collect(document, line + 1, symbol.range.end.line, _MEMBER_RULES)
        symbols.append(symbol)
        line = symbol.range.end.line + 1 if _consumes_body(symbol) else line + 1
    return symbols


def collect_symbols(text: str) -> list[DocumentSymbol]:
    """Outline of the named blocks in ``text``; sessions carry their members as children."""
    document = SourceDocument(require_text(text))
    return _collect(document, 0, document.line_count, _TOP_LEVEL_RULES)


def collect_folding_ranges(text: str) -> list[FoldingRange]:
    """One range per named block spanning more than one line, nested blocks included."""
    document = SourceDocument(require_text(text))
    ranges: list[FoldingRange] = []
    for line in range(document.line_count):
        symbol = _match(document, line, _TOP_LEVEL_RULES)
        if symbol is not None and symbol.range.end.line > line:
            ranges.append(FoldingRange(start_line=line, end_line=symbol.range.end.line))
    return ranges
