from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict

CORE_KEYWORDS: tuple[str, ...] = (
    "Focus",
    "Relax",
    "entrance",
    "finale",
    "induce",
    "implant",
    "embed",
    "freeze",
    "sharedTrance",
    "suggestion",
    "awaken",
    "observe",
    "whisper",
    "command",
    "murmur",
    "call",
    "mindLink",
    "from",
    "external",
    "session",
    "constructor",
    "expose",
    "conceal",
    "dominant",
    "tranceify",
    "loop",
    "while",
    "pendulum",
    "if",
    "else",
    "drift",
    "pauseReality",
    "suspend",
    "accelerateTime",
    "decelerateTime",
    "trance",
    "subconscious",
    "lucid",
    "deepFocus",
    "deeperStill",
    "snap",
    "sink",
    "sinkTo",
    "oscillate",
    "anchor",
    "trigger",
    "mesmerize",
    "await",
    "surrenderTo",
    "entrain",
    "when",
    "otherwise",
    "imperative",
)

TYPE_KEYWORDS: tuple[str, ...] = ("number", "string", "boolean", "trance", "lucid")

# Word forms of the comparison and logical operators, paired with their symbol.
OPERATOR_SYNONYMS: dict[str, str] = {
    "youAreFeelingVerySleepy": "==",
    "youCannotResist": "!=",
    "lookAtTheWatch": ">",
    "fallUnderMySpell": "<",
    "yourEyesAreGettingHeavy": ">=",
    "goingDeeper": "<=",
    "underMyControl": "&&",
    "resistanceIsFutile": "||",
    "lucidFallback": "??",
    "dreamReach": "?.",
}

STATEMENT_KEYWORDS: tuple[str, ...] = (
    "induce",
    "implant",
    "embed",
    "freeze",
    "observe",
    "whisper",
    "command",
    "murmur",
    "drift",
    "pauseReality",
    "anchor",
    "oscillate",
    "awaken",
    "snap",
    "sink",
    "sinkTo",
)

DECLARATION_KEYWORDS: tuple[str, ...] = ("induce", "implant", "embed", "freeze", "sharedTrance")

DEDENT_KEYWORDS: tuple[str, ...] = ("else",)

SOURCE_SUFFIXES: frozenset[str] = frozenset({".hyp", ".hypno"})


class LanguageConfig(BaseModel):
    """Lexical constants the analyzers and the formatter are parameterised with."""

    model_config = ConfigDict(frozen=True)

    indent_width: int = 4
    open_wrapper: str = "Focus"
    close_wrapper: str = "Relax"
    terminator: str = ";"
    statement_keywords: tuple[str, ...] = STATEMENT_KEYWORDS
    declaration_keywords: tuple[str, ...] = DECLARATION_KEYWORDS
    dedent_keywords: tuple[str, ...] = DEDENT_KEYWORDS


DEFAULT_CONFIG = LanguageConfig()


def is_source_file(path: Path) -> bool:
    return path.suffix.lower() in SOURCE_SUFFIXES


def iter_source_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Expand directories into the HypnoScript files below them, in sorted order.

    Explicitly named files are yielded as given, whatever their suffix; the
    caller decides whether to reject them.
    """
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob("*") if p.is_file() and is_source_file(p))
        else:
            yield path
