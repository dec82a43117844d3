from __future__ import annotations
import os


_DEFAULT_INPUT_PROMPT = "input required > "


def get_input_prompt() -> str:
    """Prompt written before a blocking read; override with LOX_INPUT_PROMPT."""
    raw = os.environ.get('LOX_INPUT_PROMPT')
    if raw is None:
        return _DEFAULT_INPUT_PROMPT
    return raw


_DEFAULT_RECURSION_LIMIT = 20000


def get_recursion_limit() -> int:
    """Python recursion limit in force while a program runs; override with LOX_RECURSION_LIMIT."""
    raw = os.environ.get('LOX_RECURSION_LIMIT')
    if not raw or not raw.strip():
        return _DEFAULT_RECURSION_LIMIT
    return int(raw)
