from collections.abc import Callable, Mapping

MessageLookup = Callable[[str], str]

DEFAULT_LOCALE = "en"

_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "error_no_focus": "Program must start with a 'Focus' block",
        "error_no_relax": "Program must end with 'Relax'",
        "error_multiple_focus": "Only one 'Focus' block is allowed per program",
        "error_multiple_relax": "Only one 'Relax' is allowed per program",
        "error_focus_order": "'Focus' must come before 'Relax'",
        "error_unbalanced_braces": "Unbalanced brace, parenthesis or bracket",
        "error_missing_semicolon": "Statement should end with ';'",
        "hint_unused_variable": "Variable '{name}' is declared but never used",
        "codeaction_focus_wrapper": "Wrap program in 'Focus { ... } Relax'",
        "codeaction_add_semicolon": "Add missing ';'",
        "codeaction_remove_unused": "Remove unused variable",
        "codeaction_remove_duplicate": "Remove duplicate",
    },
    "de": {
        "error_no_focus": "Programm muss mit einem 'Focus'-Block beginnen",
        "error_no_relax": "Programm muss mit 'Relax' enden",
        "error_multiple_focus": "Nur ein 'Focus'-Block pro Programm erlaubt",
        "error_multiple_relax": "Nur ein 'Relax' pro Programm erlaubt",
        "error_focus_order": "'Focus' muss vor 'Relax' stehen",
        "error_unbalanced_braces": "Unausgeglichene Klammer",
        "error_missing_semicolon": "Anweisung sollte mit ';' enden",
        "hint_unused_variable": "Variable '{name}' wird deklariert, aber nie verwendet",
        "codeaction_focus_wrapper": "Programm in 'Focus { ... } Relax' einschließen",
        "codeaction_add_semicolon": "Fehlendes ';' hinzufügen",
        "codeaction_remove_unused": "Ungenutzte Variable entfernen",
        "codeaction_remove_duplicate": "Duplikat entfernen",
    },
}


def available_locales() -> list[str]:
    return sorted(_MESSAGES)


def _lookup(table: Mapping[str, str], fallback: Mapping[str, str]) -> MessageLookup:
    def lookup(key: str) -> str:
        return table.get(key) or fallback.get(key) or key

    return lookup


def get_messages(locale: str | None = None) -> MessageLookup:
    """Return a lookup for ``locale`` (``de``, ``de_DE`` and ``de-DE`` are equivalent).

    Unknown locales and keys fall back to English, then to the key itself.
    """
    fallback = _MESSAGES[DEFAULT_LOCALE]
    language = (locale or DEFAULT_LOCALE).strip().lower().replace("_", "-").split("-")[0]
    table = _MESSAGES.get(language, fallback)
    return _lookup(table, fallback)


default_messages: MessageLookup = get_messages(DEFAULT_LOCALE)
