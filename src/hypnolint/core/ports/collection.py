from typing import Protocol

from hypnolint.models import Diagnostic


class DiagnosticCollection(Protocol):
    def set(self, uri: str, diagnostics: list[Diagnostic]) -> None: ...

    def get(self, uri: str) -> list[Diagnostic]: ...

    def delete(self, uri: str) -> bool: ...

    def clear(self) -> None: ...

    def uris(self) -> list[str]: ...
