"""Unit tests for the diagnostic analyzer orchestration."""

import pytest

from hypnolint.core.analyzer import analyze, publish
from hypnolint.core.document import InvalidDocumentError
from hypnolint.core.messages import get_messages
from hypnolint.models import DIAGNOSTIC_SOURCE, DiagnosticCode, Severity
from hypnolint.store import InMemoryDiagnosticCollection

_STRUCTURAL = {
    DiagnosticCode.NO_OPEN_WRAPPER,
    DiagnosticCode.NO_CLOSE_WRAPPER,
    DiagnosticCode.DUPLICATE_OPEN_WRAPPER,
    DiagnosticCode.DUPLICATE_CLOSE_WRAPPER,
    DiagnosticCode.WRAPPER_ORDER_VIOLATION,
}


def test_clean_program_has_no_diagnostics(clean_program: str) -> None:
    assert analyze(clean_program) == []


def test_single_unused_variable_program() -> None:
    diagnostics = analyze("Focus {\n induce x: number = 1;\n} Relax")
    assert [d.code for d in diagnostics] == [DiagnosticCode.UNUSED_VARIABLE]
    assert diagnostics[0].severity is Severity.HINT
    assert "'x'" in diagnostics[0].message


def test_missing_relax_yields_exactly_one_error() -> None:
    diagnostics = analyze("Focus {\n    observe 1;\n}")
    assert [d.code for d in diagnostics] == [DiagnosticCode.NO_CLOSE_WRAPPER]
    assert diagnostics[0].severity is Severity.ERROR
    assert diagnostics[0].range.start.line == 2


def test_crossed_brackets_yield_two_balance_errors() -> None:
    diagnostics = analyze("{ ( } )")
    balance = [d for d in diagnostics if d.code is DiagnosticCode.UNBALANCED_BRACE]
    assert [d.range.start.column for d in balance] == [4, 6]


def test_results_are_ordered_by_check() -> None:
    text = "Relax\nFocus {\n    observe x\n    induce y = 1;\n"
    codes = [d.code for d in analyze(text)]
    assert codes == [
        DiagnosticCode.WRAPPER_ORDER_VIOLATION,
        DiagnosticCode.UNBALANCED_BRACE,
        DiagnosticCode.MISSING_TERMINATOR,
        DiagnosticCode.UNUSED_VARIABLE,
    ]


def test_overlapping_findings_are_not_deduplicated() -> None:
    text = "Focus {\n    observe (x\n} Relax"
    codes = [d.code for d in analyze(text)]
    # `}` closes `(` (mismatch) and `{` stays open: two balance errors, no terminator warning.
    assert codes == [DiagnosticCode.UNBALANCED_BRACE, DiagnosticCode.UNBALANCED_BRACE]


def test_every_diagnostic_is_tagged_and_in_bounds(clean_program: str) -> None:
    text = clean_program.replace("whisper greeting;", "whisper greeting").replace("} Relax", "}")
    lines = text.split("\n")
    diagnostics = analyze(text)
    assert diagnostics
    for d in diagnostics:
        assert d.source == DIAGNOSTIC_SOURCE
        assert d.code is not None
        assert 0 <= d.range.start.line <= d.range.end.line < len(lines)
        assert d.range.end.column <= len(lines[d.range.end.line])


@pytest.mark.parametrize("text", ["", "\n\n", '"', "/*", "}}}", "Focus Relax Focus Relax", "induce"])
def test_degenerate_input_never_raises(text: str) -> None:
    assert isinstance(analyze(text), list)


def test_structural_completeness(clean_program: str) -> None:
    assert not [d for d in analyze(clean_program) if d.code in _STRUCTURAL]


def test_line_count_argument_is_accepted() -> None:
    assert analyze("Focus {\n} Relax", 2) == []


def test_messages_lookup_is_used() -> None:
    diagnostics = analyze("", messages=get_messages("de"))
    assert diagnostics[1].message == "Programm muss mit 'Relax' enden"


@pytest.mark.parametrize("bad", [None, b"Focus", 3.5])
def test_non_text_input_fails_fast(bad: object) -> None:
    with pytest.raises(InvalidDocumentError):
        analyze(bad)  # type: ignore[arg-type]


class TestPublish:
    def test_replaces_previous_diagnostics(self, collection: InMemoryDiagnosticCollection) -> None:
        publish(collection, "file:///a.hyp", "")
        assert len(collection.get("file:///a.hyp")) == 2

        publish(collection, "file:///a.hyp", "Focus {\n} Relax")
        assert collection.get("file:///a.hyp") == []

    def test_documents_are_independent(self, collection: InMemoryDiagnosticCollection) -> None:
        publish(collection, "a", "")
        publish(collection, "b", "Focus {\n} Relax")
        assert len(collection.get("a")) == 2
        assert collection.get("b") == []
        assert collection.uris() == ["a", "b"]
