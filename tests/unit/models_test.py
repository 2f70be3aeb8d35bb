"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from hypnolint.models import (
    DIAGNOSTIC_SOURCE,
    Diagnostic,
    DiagnosticCode,
    DocumentSymbol,
    Position,
    Severity,
    SymbolKind,
    TextRange,
)


class TestPositionModel:
    """Tests for the Position model."""

    def test_creates_position_with_valid_data(self) -> None:
        pos = Position(line=0, column=5)
        assert pos.as_tuple() == (0, 5)

    def test_position_rejects_negative_values(self) -> None:
        """Lines and columns are zero-based and never negative."""
        with pytest.raises(ValidationError):
            Position(line=-1, column=0)
        with pytest.raises(ValidationError):
            Position(line=0, column=-1)

    def test_position_is_frozen(self) -> None:
        pos = Position(line=1, column=2)
        with pytest.raises(ValidationError):
            pos.line = 3  # type: ignore[misc]

    def test_translate_moves_along_the_line(self) -> None:
        assert Position(line=2, column=3).translate(4) == Position(line=2, column=7)

    def test_position_serializes_to_dict(self) -> None:
        assert Position(line=10, column=20).model_dump() == {"line": 10, "column": 20}


class TestTextRangeModel:
    """Tests for the TextRange model."""

    def test_at_builds_range_of_width(self) -> None:
        rng = TextRange.at(3, 4, 5)
        assert rng.start.as_tuple() == (3, 4)
        assert rng.end.as_tuple() == (3, 9)

    def test_at_without_width_is_empty(self) -> None:
        rng = TextRange.at(1, 1)
        assert rng.start == rng.end

    def test_rejects_start_after_end(self) -> None:
        with pytest.raises(ValidationError):
            TextRange(start=Position(line=2, column=0), end=Position(line=1, column=9))


class TestDiagnosticModel:
    """Tests for the Diagnostic model."""

    def test_defaults_source(self) -> None:
        diagnostic = Diagnostic(range=TextRange.at(0, 0), message="m", severity=Severity.ERROR)
        assert diagnostic.source == DIAGNOSTIC_SOURCE == "hypnoscript"
        assert diagnostic.code is None

    def test_json_dump_uses_wire_values(self) -> None:
        diagnostic = Diagnostic(
            range=TextRange.at(0, 0, 5),
            message="m",
            severity=Severity.HINT,
            code=DiagnosticCode.UNUSED_VARIABLE,
        )
        data = diagnostic.model_dump(mode="json")
        assert data["severity"] == 4
        assert data["code"] == "HS_UNUSED_VARIABLE"
        assert data["range"] == {"start": {"line": 0, "column": 0}, "end": {"line": 0, "column": 5}}

    def test_round_trips_from_json(self) -> None:
        diagnostic = Diagnostic(
            range=TextRange.at(1, 2, 3),
            message="m",
            severity=Severity.WARNING,
            code=DiagnosticCode.MISSING_TERMINATOR,
        )
        assert Diagnostic.model_validate_json(diagnostic.model_dump_json()) == diagnostic


class TestSeverity:
    def test_severity_values(self) -> None:
        assert [int(s) for s in Severity] == [1, 2, 3, 4]


class TestDocumentSymbolModel:
    """Tests for the recursive DocumentSymbol model."""

    def test_children_default_to_empty(self) -> None:
        symbol = DocumentSymbol(
            name="Player",
            detail="session",
            kind=SymbolKind.CLASS,
            range=TextRange.at(0, 0),
            selection_range=TextRange.at(0, 0),
        )
        assert symbol.children == []

    def test_nested_children_validate_from_dict(self) -> None:
        data = {
            "name": "Player",
            "detail": "session",
            "kind": "class",
            "range": {"start": {"line": 0, "column": 0}, "end": {"line": 3, "column": 1}},
            "selection_range": {"start": {"line": 0, "column": 8}, "end": {"line": 0, "column": 14}},
            "children": [
                {
                    "name": "greet",
                    "detail": "suggestion",
                    "kind": "method",
                    "range": {"start": {"line": 1, "column": 0}, "end": {"line": 2, "column": 5}},
                    "selection_range": {"start": {"line": 1, "column": 15}, "end": {"line": 1, "column": 20}},
                }
            ],
        }
        symbol = DocumentSymbol.model_validate(data)
        assert symbol.children[0].kind is SymbolKind.METHOD
