from fastapi import APIRouter

from hypnolint.api.schemas import (
    FixesRequest,
    FixesResponse,
    FormatRequest,
    FormatResponse,
    OutlineResponse,
    TextRequest,
)
from hypnolint.core.analyzer import analyze
from hypnolint.core.fixes import fix_document, quick_fixes
from hypnolint.core.formatter import format_text
from hypnolint.core.language import LanguageConfig
from hypnolint.core.messages import get_messages
from hypnolint.core.outline import collect_folding_ranges, collect_symbols
from hypnolint.settings import get_locale

router = APIRouter(tags=["formatting"])


@router.post("/format", response_model=FormatResponse)
async def format_document(body: FormatRequest) -> FormatResponse:
    formatted = format_text(body.text, LanguageConfig(indent_width=body.indent_width))
    return FormatResponse(text=formatted, changed=formatted != body.text)


@router.post("/outline", response_model=OutlineResponse)
async def outline(body: TextRequest) -> OutlineResponse:
    return OutlineResponse(symbols=collect_symbols(body.text), folding_ranges=collect_folding_ranges(body.text))


@router.post("/fixes", response_model=FixesResponse)
async def fixes(body: FixesRequest) -> FixesResponse:
    """Quick fixes for the document's current diagnostics, plus the text with preferred fixes applied."""
    messages = get_messages(body.locale or get_locale())
    diagnostics = analyze(body.text, messages=messages)
    return FixesResponse(
        fixes=quick_fixes(body.text, diagnostics, messages=messages),
        fixed_text=fix_document(body.text, messages=messages),
    )
