"""Unit tests for SourceDocument offset/position mapping."""

import pytest

from hypnolint.core.document import InvalidDocumentError, SourceDocument
from hypnolint.models import Position


class TestSourceDocument:
    def test_lines_split_on_newline(self) -> None:
        doc = SourceDocument("ab\ncd\n")
        assert doc.lines == ("ab", "cd", "")
        assert doc.line_count == 3

    def test_empty_document_has_one_line(self) -> None:
        doc = SourceDocument("")
        assert doc.lines == ("",)
        assert doc.line_count == 1

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [(0, (0, 0)), (2, (0, 2)), (3, (1, 0)), (4, (1, 1)), (6, (2, 0)), (99, (2, 0))],
    )
    def test_position_at(self, offset: int, expected: tuple[int, int]) -> None:
        doc = SourceDocument("ab\ncd\n")
        assert doc.position_at(offset).as_tuple() == expected

    def test_offset_at_inverts_position_at(self) -> None:
        doc = SourceDocument("Focus {\n  x;\n} Relax")
        for offset in range(len(doc.text) + 1):
            assert doc.offset_at(doc.position_at(offset)) == offset

    def test_offset_at_clamps_out_of_range_positions(self) -> None:
        doc = SourceDocument("ab\ncd")
        assert doc.offset_at(Position(line=1, column=50)) == 5
        assert doc.offset_at(Position(line=9, column=0)) == 3

    def test_range_at_covers_width(self) -> None:
        doc = SourceDocument("Focus {\n} Relax")
        rng = doc.range_at(10, 5)
        assert rng.start.as_tuple() == (1, 2)
        assert rng.end.as_tuple() == (1, 7)

    def test_range_at_never_crosses_a_line(self) -> None:
        doc = SourceDocument("ab\ncd")
        rng = doc.range_at(1, 5)
        assert rng.start.as_tuple() == (0, 1)
        assert rng.end.as_tuple() == (0, 2)

    def test_end_of_line(self) -> None:
        doc = SourceDocument("abc\nde")
        rng = doc.end_of_line(0)
        assert rng.start.as_tuple() == rng.end.as_tuple() == (0, 3)

    def test_scrubbed_lines_match_raw_lines(self) -> None:
        doc = SourceDocument('observe "{";\n// }\nx;')
        assert [len(line) for line in doc.scrubbed_lines] == [len(line) for line in doc.lines]
        assert doc.scrubbed_lines[1].strip() == ""

    @pytest.mark.parametrize("bad", [None, b"Focus {} Relax", 42, ["Focus"]])
    def test_rejects_non_text(self, bad: object) -> None:
        with pytest.raises(InvalidDocumentError):
            SourceDocument(bad)  # type: ignore[arg-type]

    def test_invalid_document_error_is_a_type_error(self) -> None:
        assert issubclass(InvalidDocumentError, TypeError)
