import os

from hypnolint.core.messages import DEFAULT_LOCALE


def get_locale() -> str:
    return os.getenv("HYPNOLINT_LOCALE", DEFAULT_LOCALE)


def get_log_level() -> str:
    return os.getenv("HYPNOLINT_LOG_LEVEL", "WARNING").upper()
