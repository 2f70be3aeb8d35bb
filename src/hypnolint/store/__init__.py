from hypnolint.store.memory import InMemoryDiagnosticCollection

__all__ = ["InMemoryDiagnosticCollection"]
