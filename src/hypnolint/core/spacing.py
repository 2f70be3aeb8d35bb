"""Interior spacing for one line of code.

Only code is edited: string and comment content is blank in the scrubbed copy
of the line, so nothing found there is ever touched. A space is only added
where there is none, and whitespace is only removed in front of ``;``, so
existing runs of spaces survive and a second pass changes nothing.
"""

import re

from hypnolint.core.language import CORE_KEYWORDS, OPERATOR_SYNONYMS, TYPE_KEYWORDS

_SPACED_OPERATORS = (
    "==", "!=", ">=", "<=", "&&", "||", "??",
    "+=", "-=", "*=", "/=", "%=", "**",
    "=", "+", "-", "*", "/", "%", "<", ">",
)  # fmt: skip
# Matched so their characters are not mistaken for the operators above.
_PASS_THROUGH = ("=>", "->", "++", "--", "?.")

_OPERATOR = re.compile(
    "|".join(re.escape(op) for op in sorted(_SPACED_OPERATORS + _PASS_THROUGH, key=len, reverse=True))
)
_OPERAND_END = re.compile(r'[\w)\]"]$')
_LAST_WORD = re.compile(r"(\w+)$")
_EXPONENT = re.compile(r"\d[eE]$")

# Keywords that read like calls: ``suggestion(a) { ... }``, ``constructor(name)``.
_CALL_LIKE = frozenset({"suggestion", "constructor"})
_KEYWORD_BEFORE_GROUP = re.compile(
    r"(?<![\w.])(?:"
    + "|".join(sorted((k for k in CORE_KEYWORDS if k not in _CALL_LIKE), key=len, reverse=True))
    + r")(?=[({\[\"])"
)
_TYPE_AFTER_COLON = re.compile(r":(?=(?:" + "|".join(TYPE_KEYWORDS) + r")\b)")
_WORD_OPERATOR = re.compile(r"(?<![\w.])(?:" + "|".join(OPERATOR_SYNONYMS) + r")(?!\w)")
_OPENS_BLOCK = re.compile(r"[\w)\]\"](?=\{)")
_WORD_AFTER_BLOCK = re.compile(r"\}(?=\w)")

_KEYWORDS = frozenset(CORE_KEYWORDS)
# No space is added in front of these, nor after these.
_TIGHT_BEFORE = frozenset(";,)]")
_TIGHT_AFTER = frozenset("([")


def _is_binary(code: str, start: int, operator: str) -> bool:
    before = code[:start].rstrip()
    if not _OPERAND_END.search(before):
        return False
    word = _LAST_WORD.search(before)
    if word is not None and word.group(1) in _KEYWORDS:
        return False
    return not (operator in ("+", "-") and _EXPONENT.search(before))


def space_line(line: str, code: str) -> str:
    """Normalize spacing in ``line``; ``code`` is its scrubbed counterpart.

    A space is added where one is missing around binary and word operators,
    after commas, after keywords followed by ``(``/``{``/``"``, before ``{``,
    after a ``}`` followed by a word, and after ``:`` followed by a type name.
    Whitespace before ``;`` is removed.
    """
    code = code[: len(line)]
    inserts: set[int] = set()
    deleted: set[int] = set()

    def space_before(index: int) -> None:
        if index > 0 and not line[index - 1].isspace() and line[index - 1] not in _TIGHT_AFTER:
            inserts.add(index)

    def space_after(index: int) -> None:
        if index < len(line) and not line[index].isspace() and line[index] not in _TIGHT_BEFORE:
            inserts.add(index)

    for match in _OPERATOR.finditer(code):
        operator = match.group()
        if operator in _SPACED_OPERATORS and _is_binary(code, match.start(), operator):
            space_before(match.start())
            space_after(match.end())

    for match in _WORD_OPERATOR.finditer(code):
        space_before(match.start())
        space_after(match.end())

    for match in re.finditer(",", code):
        space_after(match.end())

    for pattern in (_KEYWORD_BEFORE_GROUP, _TYPE_AFTER_COLON, _OPENS_BLOCK, _WORD_AFTER_BLOCK):
        for match in pattern.finditer(code):
            inserts.add(match.end())

    for match in re.finditer(";", code):
        start = match.start()
        while start > 0 and line[start - 1] in " \t":
            start -= 1
        if start > 0:
            deleted.update(range(start, match.start()))

    if not inserts and not deleted:
        return line
    out: list[str] = []
    for index, ch in enumerate(line):
        if index in inserts:
            out.append(" ")
        if index not in deleted:
            out.append(ch)
    return "".join(out)
