"""Line-shape classification shared by the terminator checker and the formatter."""

from dataclasses import dataclass

_COMMENT_PREFIXES = ("//", "/*")


@dataclass(frozen=True)
class LineShape:
    trimmed: str
    code: str
    leading_closers: int
    opened: int
    unmatched_closers: int
    open_groups: int

    @property
    def is_blank(self) -> bool:
        return not self.trimmed

    @property
    def is_comment(self) -> bool:
        return self.trimmed.startswith(_COMMENT_PREFIXES)

    @property
    def opens_block(self) -> bool:
        return self.code.endswith("{")

    @property
    def closes_block(self) -> bool:
        return self.code.endswith("}")

    @property
    def is_block_boundary(self) -> bool:
        return self.opens_block or self.closes_block

    @property
    def continues(self) -> bool:
        """More ``(``/``[`` than ``)``/``]``: the statement carries on below."""
        return self.open_groups > 0

    def starts_with_word(self, words: tuple[str, ...] | list[str]) -> bool:
        for word in words:
            if self.code.startswith(word):
                rest = self.code[len(word) :]
                if not rest or not (rest[0].isalnum() or rest[0] == "_"):
                    return True
        return False


def classify(line: str, code: str | None = None) -> LineShape:
    """Classify ``line``; ``code`` is its scrubbed counterpart when one is available."""
    code = (line if code is None else code).strip()

    leading = 0
    index = 0
    while index < len(code) and code[index] in "} \t":
        if code[index] == "}":
            leading += 1
        index += 1

    depth = 0
    unmatched = 0
    groups = 0
    for ch in code[index:]:
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth:
                depth -= 1
            else:
                unmatched += 1
        elif ch in "([":
            groups += 1
        elif ch in ")]":
            groups -= 1

    return LineShape(
        trimmed=line.strip(),
        code=code,
        leading_closers=leading,
        opened=depth,
        unmatched_closers=unmatched,
        open_groups=groups,
    )
