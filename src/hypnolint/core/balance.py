from dataclasses import dataclass

from hypnolint.core.document import SourceDocument
from hypnolint.core.messages import MessageLookup, default_messages
from hypnolint.models import Diagnostic, DiagnosticCode, Severity

PAIRS: dict[str, str] = {"{": "}", "(": ")", "[": "]"}
_CLOSERS = frozenset(PAIRS.values())


@dataclass(frozen=True)
class BraceFrame:
    character: str
    position: int


def find_unbalanced(scrubbed: str) -> list[int]:
    """Return offsets of every unbalanced bracket character, in report order.

    Any closer met on a non-empty stack pops exactly one frame, matching or
    not; a mismatched opener is dropped rather than re-pushed. Openers still
    on the stack at the end are reported last, in opening order.
    """
    stack: list[BraceFrame] = []
    offsets: list[int] = []
    for index, ch in enumerate(scrubbed):
        if ch in PAIRS:
            stack.append(BraceFrame(ch, index))
        elif ch in _CLOSERS:
            if not stack:
                offsets.append(index)
                continue
            frame = stack.pop()
            if PAIRS[frame.character] != ch:
                offsets.append(index)
    offsets.extend(frame.position for frame in stack)
    return offsets


def check_balance(document: SourceDocument, messages: MessageLookup = default_messages) -> list[Diagnostic]:
    message = messages("error_unbalanced_braces")
    return [
        Diagnostic(
            range=document.range_at(offset, 1),
            message=message,
            severity=Severity.ERROR,
            code=DiagnosticCode.UNBALANCED_BRACE,
        )
        for offset in find_unbalanced(document.scrubbed)
    ]
