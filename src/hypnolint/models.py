from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

DIAGNOSTIC_SOURCE = "hypnoscript"


class Severity(IntEnum):
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class DiagnosticCode(str, Enum):
    NO_OPEN_WRAPPER = "HS_NO_FOCUS"
    NO_CLOSE_WRAPPER = "HS_NO_RELAX"
    DUPLICATE_OPEN_WRAPPER = "HS_MULTIPLE_FOCUS"
    DUPLICATE_CLOSE_WRAPPER = "HS_MULTIPLE_RELAX"
    WRAPPER_ORDER_VIOLATION = "HS_FOCUS_ORDER"
    UNBALANCED_BRACE = "HS_UNBALANCED_BRACES"
    MISSING_TERMINATOR = "HS_MISSING_SEMICOLON"
    UNUSED_VARIABLE = "HS_UNUSED_VARIABLE"


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    column: int = Field(ge=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.column)

    def translate(self, columns: int) -> "Position":
        return Position(line=self.line, column=self.column + columns)


class TextRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @model_validator(mode="after")
    def _check_order(self) -> "TextRange":
        if self.start.as_tuple() > self.end.as_tuple():
            raise ValueError(f"range start {self.start.as_tuple()} is after end {self.end.as_tuple()}")
        return self

    @classmethod
    def at(cls, line: int, column: int, width: int = 0) -> "TextRange":
        start = Position(line=line, column=column)
        return cls(start=start, end=start.translate(width))


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    range: TextRange
    message: str
    severity: Severity
    code: DiagnosticCode | None = None
    source: str = DIAGNOSTIC_SOURCE


class TextEdit(BaseModel):
    model_config = ConfigDict(frozen=True)

    range: TextRange
    new_text: str


class QuickFix(BaseModel):
    title: str
    code: DiagnosticCode
    edits: list[TextEdit]
    preferred: bool = False


class SymbolKind(str, Enum):
    MODULE = "module"
    CLASS = "class"
    STRUCT = "struct"
    METHOD = "method"
    EVENT = "event"
    NAMESPACE = "namespace"


class DocumentSymbol(BaseModel):
    name: str
    detail: str
    kind: SymbolKind
    range: TextRange
    selection_range: TextRange
    children: list["DocumentSymbol"] = Field(default_factory=list)


DocumentSymbol.model_rebuild()  # necessary for recursive types


class FoldingRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_line: int
    end_line: int
