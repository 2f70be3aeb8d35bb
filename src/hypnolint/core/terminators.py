from hypnolint.core.document import SourceDocument
from hypnolint.core.language import DEFAULT_CONFIG, LanguageConfig
from hypnolint.core.lines import classify
from hypnolint.core.messages import MessageLookup, default_messages
from hypnolint.models import Diagnostic, DiagnosticCode, Severity


def check_terminators(
    document: SourceDocument,
    config: LanguageConfig = DEFAULT_CONFIG,
    messages: MessageLookup = default_messages,
) -> list[Diagnostic]:
    """Flag statement-keyword lines that do not end with the terminator.

    Purely line-local: blank and comment lines, block boundaries and lines
    with an open ``(``/``[`` are never flagged.
    """
    diagnostics: list[Diagnostic] = []
    for number, (line, code) in enumerate(zip(document.lines, document.scrubbed_lines, strict=True)):
        shape = classify(line, code)
        if shape.is_blank or shape.is_comment or not shape.code or shape.is_block_boundary or shape.continues:
            continue
        if shape.starts_with_word(config.statement_keywords) and not shape.code.endswith(config.terminator):
            diagnostics.append(
                Diagnostic(
                    range=document.end_of_line(number),
                    message=messages("error_missing_semicolon"),
                    severity=Severity.WARNING,
                    code=DiagnosticCode.MISSING_TERMINATOR,
                )
            )
    return diagnostics
