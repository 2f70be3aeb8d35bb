"""FastMCP server exposing hypnolint tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from hypnolint.core.analyzer import analyze as _analyze
from hypnolint.core.fixes import fix_document as _fix_document
from hypnolint.core.formatter import format_text
from hypnolint.core.language import LanguageConfig
from hypnolint.core.messages import get_messages
from hypnolint.core.outline import collect_symbols
from hypnolint.settings import get_locale


def create_mcp_server() -> FastMCP:
    """Create a FastMCP server with the analysis, fix, format and outline tools."""

    mcp = FastMCP("hypnolint", instructions="Check, fix and format HypnoScript source code.")

    @mcp.tool()
    async def analyze(text: str, locale: str | None = None) -> list[dict[str, Any]]:
        """Report structural, syntax and hygiene diagnostics for HypnoScript source."""
        diagnostics = _analyze(text, messages=get_messages(locale or get_locale()))
        return [d.model_dump(mode="json") for d in diagnostics]

    @mcp.tool()
    async def format_document(text: str, indent_width: int = 4) -> str:
        """Re-indent HypnoScript source and return the new text."""
        return format_text(text, LanguageConfig(indent_width=indent_width))

    @mcp.tool()
    async def fix_document(text: str) -> str:
        """Add missing terminators and the Focus/Relax wrapper where they are missing."""
        return _fix_document(text, messages=get_messages(get_locale()))

    @mcp.tool()
    async def outline(text: str) -> list[dict[str, Any]]:
        """List the named blocks (Focus, sessions, suggestions, ...) of HypnoScript source."""
        return [s.model_dump(mode="json") for s in collect_symbols(text)]

    return mcp
