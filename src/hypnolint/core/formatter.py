"""Re-indent HypnoScript source and normalize spacing inside code lines.

Formatting is line oriented and conservative: leading indentation is
recomputed, trailing whitespace goes, and missing spaces around operators and
after commas and keywords are added (see ``spacing``). Comment lines and lines
that start inside a string or block comment are left exactly as written.
"""

import logging
from dataclasses import dataclass

from hypnolint.core.document import SourceDocument, require_text
from hypnolint.core.language import DEFAULT_CONFIG, LanguageConfig
from hypnolint.core.lines import LineShape, classify
from hypnolint.core.scrubber import LexState
from hypnolint.core.spacing import space_line

logger = logging.getLogger(__name__)


@dataclass
class FormatterState:
    indent_level: int = 0
    in_block_comment: bool = False


def _indent_for(shape: LineShape, level: int, config: LanguageConfig) -> int:
    own = level - shape.leading_closers
    if shape.starts_with_word(config.dedent_keywords):
        own -= 1
    return max(0, own)


def _next_level(shape: LineShape, level: int) -> int:
    return max(0, level - shape.leading_closers + shape.opened - shape.unmatched_closers)


def format_text(text: str, config: LanguageConfig = DEFAULT_CONFIG) -> str:
    document = SourceDocument(require_text(text))
    state = FormatterState()
    unit = " " * config.indent_width
    out: list[str] = []

    states = document.line_states
    for number, (line, code) in enumerate(zip(document.lines, document.scrubbed_lines, strict=True)):
        state.in_block_comment = states[number] is LexState.BLOCK_COMMENT
        shape = classify(line, code)
        line = line.rstrip("\r")

        if state.in_block_comment or states[number] is LexState.STRING or shape.is_comment:
            out.append(line)
        elif shape.is_blank:
            out.append("")
        else:
            # A string left open at the end of the line keeps its trailing whitespace.
            ends_in_string = number + 1 < len(states) and states[number + 1] is LexState.STRING
            spaced = space_line(line, code)
            body = spaced.lstrip() if ends_in_string else spaced.strip()
            out.append(unit * _indent_for(shape, state.indent_level, config) + body)

        # Braces after a closed comment on a verbatim line still count.
        state.indent_level = _next_level(shape, state.indent_level)

    formatted = "\n".join(out)
    if formatted != text:
        logger.debug("Reformatted %d line(s)", document.line_count)
    return formatted
