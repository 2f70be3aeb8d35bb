from __future__ import annotations

from pydantic import BaseModel

from hypnolint.models import Diagnostic, DocumentSymbol, FoldingRange, QuickFix


class HealthResponse(BaseModel):
    status: str = "ok"


class AnalyzeRequest(BaseModel):
    text: str
    uri: str | None = None
    locale: str | None = None


class DiagnosticsResponse(BaseModel):
    uri: str | None = None
    diagnostics: list[Diagnostic]


class ClearResponse(BaseModel):
    cleared: list[str]


class TextRequest(BaseModel):
    text: str


class FormatRequest(TextRequest):
    indent_width: int = 4


class FormatResponse(BaseModel):
    text: str
    changed: bool


class OutlineResponse(BaseModel):
    symbols: list[DocumentSymbol]
    folding_ranges: list[FoldingRange]


class FixesRequest(TextRequest):
    locale: str | None = None


class FixesResponse(BaseModel):
    fixes: list[QuickFix]
    fixed_text: str
