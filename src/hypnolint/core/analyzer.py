import logging

from hypnolint.core.balance import check_balance
from hypnolint.core.document import SourceDocument, require_text
from hypnolint.core.language import DEFAULT_CONFIG, LanguageConfig
from hypnolint.core.messages import MessageLookup, default_messages
from hypnolint.core.ports.collection import DiagnosticCollection
from hypnolint.core.structure import check_structure
from hypnolint.core.terminators import check_terminators
from hypnolint.core.variables import check_unused_variables
from hypnolint.models import Diagnostic

logger = logging.getLogger(__name__)


def analyze(
    text: str,
    line_count: int | None = None,
    *,
    config: LanguageConfig = DEFAULT_CONFIG,
    messages: MessageLookup = default_messages,
) -> list[Diagnostic]:
    """Run every check over ``text`` and return their diagnostics in check order.

    Order is structure, balance, terminators, unused variables. Nothing is
    deduplicated or filtered across checks. ``line_count`` is the host's view
    of the document length and only has to be given when it differs from the
    number of ``\\n``-separated lines in ``text``.
    """
    document = SourceDocument(require_text(text))
    if line_count is not None and line_count != document.line_count:
        logger.debug("Host line count %d differs from %d parsed lines", line_count, document.line_count)

    diagnostics: list[Diagnostic] = []
    diagnostics.extend(check_structure(document, config, messages))
    diagnostics.extend(check_balance(document, messages))
    diagnostics.extend(check_terminators(document, config, messages))
    diagnostics.extend(check_unused_variables(document, config, messages))

    logger.debug("Analyzed %d line(s): %d diagnostic(s)", document.line_count, len(diagnostics))
    return diagnostics


def publish(
    collection: DiagnosticCollection,
    uri: str,
    text: str,
    *,
    config: LanguageConfig = DEFAULT_CONFIG,
    messages: MessageLookup = default_messages,
) -> list[Diagnostic]:
    """Analyze ``text`` and replace everything ``collection`` holds for ``uri``."""
    diagnostics = analyze(text, config=config, messages=messages)
    collection.set(uri, diagnostics)
    return diagnostics
