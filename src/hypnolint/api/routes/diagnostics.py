import logging

from fastapi import APIRouter, Depends

from hypnolint.api.dependencies import get_collection
from hypnolint.api.schemas import AnalyzeRequest, ClearResponse, DiagnosticsResponse
from hypnolint.core.analyzer import analyze, publish
from hypnolint.core.messages import get_messages
from hypnolint.core.ports.collection import DiagnosticCollection
from hypnolint.settings import get_locale

logger = logging.getLogger(__name__)

router = APIRouter(tags=["diagnostics"])


@router.post("/analyze", response_model=DiagnosticsResponse)
async def analyze_document(
    body: AnalyzeRequest,
    collection: DiagnosticCollection = Depends(get_collection),
) -> DiagnosticsResponse:
    """Analyze a document; with a ``uri`` its stored diagnostics are replaced."""
    messages = get_messages(body.locale or get_locale())
    if body.uri is None:
        return DiagnosticsResponse(diagnostics=analyze(body.text, messages=messages))
    diagnostics = publish(collection, body.uri, body.text, messages=messages)
    logger.info("Published %d diagnostic(s) for %s", len(diagnostics), body.uri)
    return DiagnosticsResponse(uri=body.uri, diagnostics=diagnostics)


@router.get("/diagnostics", response_model=DiagnosticsResponse)
async def get_diagnostics(
    uri: str,
    collection: DiagnosticCollection = Depends(get_collection),
) -> DiagnosticsResponse:
    return DiagnosticsResponse(uri=uri, diagnostics=collection.get(uri))


@router.delete("/diagnostics", response_model=ClearResponse)
async def clear_diagnostics(
    uri: str | None = None,
    collection: DiagnosticCollection = Depends(get_collection),
) -> ClearResponse:
    """Forget one document's diagnostics, or every document's when no ``uri`` is given."""
    if uri is not None:
        return ClearResponse(cleared=[uri] if collection.delete(uri) else [])
    cleared = collection.uris()
    collection.clear()
    return ClearResponse(cleared=cleared)
