import logging
from collections.abc import Iterable, Sequence

from hypnolint.core.analyzer import analyze
from hypnolint.core.document import SourceDocument, require_text
from hypnolint.core.language import DEFAULT_CONFIG, LanguageConfig
from hypnolint.core.messages import MessageLookup, default_messages
from hypnolint.models import Diagnostic, DiagnosticCode, Position, QuickFix, TextEdit, TextRange

logger = logging.getLogger(__name__)

_WRAPPER_CODES = frozenset({DiagnosticCode.NO_OPEN_WRAPPER, DiagnosticCode.NO_CLOSE_WRAPPER})


def _insert(position: Position, new_text: str) -> TextEdit:
    return TextEdit(range=TextRange(start=position, end=position), new_text=new_text)


def _terminator_fix(document: SourceDocument, diagnostic: Diagnostic, config: LanguageConfig, title: str) -> QuickFix:
    line = diagnostic.range.end.line
    # After the last code character, so a trailing comment stays after the terminator.
    column = len(document.scrubbed_lines[line].rstrip())
    return QuickFix(
        title=title,
        code=DiagnosticCode.MISSING_TERMINATOR,
        edits=[_insert(Position(line=line, column=column), config.terminator)],
        preferred=True,
    )


def _delete_line_fix(document: SourceDocument, diagnostic: Diagnostic, title: str) -> QuickFix:
    line = diagnostic.range.start.line
    if line + 1 < document.line_count:
        end = Position(line=line + 1, column=0)
    else:
        end = Position(line=line, column=len(document.lines[line]))
    return QuickFix(
        title=title,
        code=DiagnosticCode.UNUSED_VARIABLE,
        edits=[TextEdit(range=TextRange(start=Position(line=line, column=0), end=end), new_text="")],
    )


def _wrapper_fix(document: SourceDocument, codes: set[DiagnosticCode], config: LanguageConfig, title: str) -> QuickFix:
    edits: list[TextEdit] = []
    if DiagnosticCode.NO_OPEN_WRAPPER in codes:
        edits.append(_insert(Position(line=0, column=0), f"{config.open_wrapper} {{\n"))
    if DiagnosticCode.NO_CLOSE_WRAPPER in codes:
        last = document.line_count - 1
        prefix = "" if not document.lines[last] else "\n"
        edits.append(_insert(Position(line=last, column=len(document.lines[last])), f"{prefix}}} {config.close_wrapper}\n"))
    code = DiagnosticCode.NO_OPEN_WRAPPER if DiagnosticCode.NO_OPEN_WRAPPER in codes else DiagnosticCode.NO_CLOSE_WRAPPER
    return QuickFix(title=title, code=code, edits=edits, preferred=True)


def quick_fixes(
    text: str,
    diagnostics: Iterable[Diagnostic],
    config: LanguageConfig = DEFAULT_CONFIG,
    messages: MessageLookup = default_messages,
) -> list[QuickFix]:
    """Build the quick fixes offered for ``diagnostics``.

    Missing wrapper keywords produce a single fix however many diagnostics
    report them; it is appended after the per-diagnostic fixes.
    """
    document = SourceDocument(require_text(text))
    fixes: list[QuickFix] = []
    wrapper_codes: set[DiagnosticCode] = set()

    for diagnostic in diagnostics:
        code = diagnostic.code
        if code in _WRAPPER_CODES:
            wrapper_codes.add(code)  # type: ignore[arg-type]
        elif code is DiagnosticCode.MISSING_TERMINATOR:
            fixes.append(_terminator_fix(document, diagnostic, config, messages("codeaction_add_semicolon")))
        elif code is DiagnosticCode.UNUSED_VARIABLE:
            fixes.append(_delete_line_fix(document, diagnostic, messages("codeaction_remove_unused")))
        elif code in (DiagnosticCode.DUPLICATE_OPEN_WRAPPER, DiagnosticCode.DUPLICATE_CLOSE_WRAPPER):
            fixes.append(
                QuickFix(
                    title=messages("codeaction_remove_duplicate"),
                    code=code,
                    edits=[TextEdit(range=diagnostic.range, new_text="")],
                )
            )

    if wrapper_codes:
        fixes.append(_wrapper_fix(document, wrapper_codes, config, messages("codeaction_focus_wrapper")))
    return fixes


def apply_edits(text: str, edits: Sequence[TextEdit]) -> str:
    """Apply ``edits`` to ``text``; raises ``ValueError`` when two edits overlap.

    Insertions at the same offset land in the order they are listed.
    """
    document = SourceDocument(require_text(text))
    spans = [
        (document.offset_at(edit.range.start), document.offset_at(edit.range.end), index, edit.new_text)
        for index, edit in enumerate(edits)
    ]
    spans.sort(reverse=True)

    result = text
    previous_start: int | None = None
    for start, end, _, new_text in spans:
        if previous_start is not None and end > previous_start:
            raise ValueError(f"Overlapping edits at offset {start}")
        result = result[:start] + new_text + result[end:]
        previous_start = start
    return result


def fix_document(
    text: str,
    config: LanguageConfig = DEFAULT_CONFIG,
    messages: MessageLookup = default_messages,
) -> str:
    """Apply every preferred quick fix (terminators, wrapper) in one pass."""
    diagnostics = analyze(text, config=config, messages=messages)
    preferred = [fix for fix in quick_fixes(text, diagnostics, config, messages) if fix.preferred]
    edits = [edit for fix in preferred for edit in fix.edits]
    logger.debug("Applying %d preferred fix(es)", len(preferred))
    return apply_edits(text, edits)
