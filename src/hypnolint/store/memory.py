import logging

from hypnolint.models import Diagnostic

logger = logging.getLogger(__name__)


class InMemoryDiagnosticCollection:
    """Latest diagnostics per document URI.

    ``set`` replaces a document's previous diagnostics wholesale; nothing is
    merged. When analyses of one document overlap, the last ``set`` wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[Diagnostic]] = {}

    def set(self, uri: str, diagnostics: list[Diagnostic]) -> None:
        self._entries[uri] = list(diagnostics)
        logger.debug("Stored %d diagnostic(s) for %s", len(diagnostics), uri)

    def get(self, uri: str) -> list[Diagnostic]:
        return list(self._entries.get(uri, []))

    def delete(self, uri: str) -> bool:
        return self._entries.pop(uri, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def uris(self) -> list[str]:
        return sorted(self._entries)
