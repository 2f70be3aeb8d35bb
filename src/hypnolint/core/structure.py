import re

from hypnolint.core.document import SourceDocument
from hypnolint.core.language import DEFAULT_CONFIG, LanguageConfig
from hypnolint.core.messages import MessageLookup, default_messages
from hypnolint.models import Diagnostic, DiagnosticCode, Severity, TextRange


def _word_offsets(text: str, word: str) -> list[int]:
    return [m.start() for m in re.finditer(rf"\b{re.escape(word)}\b", text)]


def check_structure(
    document: SourceDocument,
    config: LanguageConfig = DEFAULT_CONFIG,
    messages: MessageLookup = default_messages,
) -> list[Diagnostic]:
    """Validate the ``Focus ... Relax`` program wrapper."""
    opens = _word_offsets(document.scrubbed, config.open_wrapper)
    closes = _word_offsets(document.scrubbed, config.close_wrapper)
    diagnostics: list[Diagnostic] = []

    def _error(range_: TextRange, key: str, code: DiagnosticCode) -> None:
        diagnostics.append(Diagnostic(range=range_, message=messages(key), severity=Severity.ERROR, code=code))

    if not opens:
        _error(TextRange.at(0, 0), "error_no_focus", DiagnosticCode.NO_OPEN_WRAPPER)

    if not closes:
        _error(TextRange.at(document.line_count - 1, 0), "error_no_relax", DiagnosticCode.NO_CLOSE_WRAPPER)

    for offset in opens[1:]:
        _error(
            document.range_at(offset, len(config.open_wrapper)),
            "error_multiple_focus",
            DiagnosticCode.DUPLICATE_OPEN_WRAPPER,
        )

    for offset in closes[1:]:
        _error(
            document.range_at(offset, len(config.close_wrapper)),
            "error_multiple_relax",
            DiagnosticCode.DUPLICATE_CLOSE_WRAPPER,
        )

    if opens and closes and opens[0] > closes[0]:
        _error(
            document.range_at(opens[0], len(config.open_wrapper)),
            "error_focus_order",
            DiagnosticCode.WRAPPER_ORDER_VIOLATION,
        )

    return diagnostics
