"""Declared-but-unused variable detection by raw occurrence counting.

This is deliberately not scope analysis: an identifier counts as used when it
occurs anywhere in the (scrubbed) document more often than it is declared.
Shadowing and reuse of a name across blocks are not told apart.
"""

import re
from dataclasses import dataclass, field

from hypnolint.core.document import SourceDocument
from hypnolint.core.language import DEFAULT_CONFIG, LanguageConfig
from hypnolint.core.messages import MessageLookup, default_messages
from hypnolint.models import Diagnostic, DiagnosticCode, Severity

_IDENTIFIER = r"[^\W\d]\w*"


@dataclass
class VariableRecord:
    name: str
    declarations: list[int] = field(default_factory=list)
    occurrences: int = 0

    @property
    def used(self) -> bool:
        return self.occurrences > len(self.declarations)


def _declaration_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    # "sharedTrance induce name" declares ``name``, not ``induce``.
    return re.compile(rf"\b(?:{alternatives})\s+(?:(?:{alternatives})\s+)*({_IDENTIFIER})")


def track_variables(scrubbed: str, config: LanguageConfig = DEFAULT_CONFIG) -> dict[str, VariableRecord]:
    records: dict[str, VariableRecord] = {}
    for match in _declaration_pattern(config.declaration_keywords).finditer(scrubbed):
        name = match.group(1)
        records.setdefault(name, VariableRecord(name)).declarations.append(match.start(1))

    for record in records.values():
        record.occurrences = len(re.findall(rf"\b{re.escape(record.name)}\b", scrubbed))
    return records


def check_unused_variables(
    document: SourceDocument,
    config: LanguageConfig = DEFAULT_CONFIG,
    messages: MessageLookup = default_messages,
) -> list[Diagnostic]:
    template = messages("hint_unused_variable")
    diagnostics: list[Diagnostic] = []
    for record in track_variables(document.scrubbed, config).values():
        if record.used:
            continue
        for offset in record.declarations:
            diagnostics.append(
                Diagnostic(
                    range=document.range_at(offset, len(record.name)),
                    message=template.replace("{name}", record.name),
                    severity=Severity.HINT,
                    code=DiagnosticCode.UNUSED_VARIABLE,
                )
            )
    return diagnostics
