"""Terminal prompts and coloured console output for the interactive tools."""

from __future__ import annotations

import getpass
import os
import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, TextIO, Tuple

import colorama

colorama.just_fix_windows_console()

_COLORS = {
    "red": colorama.Fore.RED,
    "green": colorama.Fore.GREEN,
    "yellow": colorama.Fore.YELLOW,
}

DEFAULT_YES_TOKENS: Tuple[str, ...] = ("yes", "y")
DEFAULT_MIN_PASSWORD_LENGTH = 8


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    if parsed <= 0:
        return None
    return parsed


def _default_min_password_length() -> int:
    return _env_int("SIMPLEENC_MIN_PASSWORD_LENGTH") or DEFAULT_MIN_PASSWORD_LENGTH


@dataclass(frozen=True)
class PromptConfig:
    yes_tokens: Tuple[str, ...] = DEFAULT_YES_TOKENS
    min_password_length: int = field(default_factory=_default_min_password_length)


def _supports_color(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    return bool(getattr(stream, "isatty", lambda: False)())


def echo(message: str = "", color: Optional[str] = None, *, error: bool = False) -> None:
    """Print ``message``, coloured when the target stream is a terminal."""
    stream = sys.stderr if error else sys.stdout
    if color and _supports_color(stream):
        message = f"{_COLORS[color]}{message}{colorama.Style.RESET_ALL}"
    print(message, file=stream)


def request_password(prompt: str = "") -> str:
    return getpass.getpass(prompt)


def request_input(prompt: str = "") -> str:
    return input(prompt)


def ask_question(
    prompt: str,
    yes: Optional[Iterable[str]] = None,
    config: Optional[PromptConfig] = None
) -> bool:
    """Ask a yes/no question and report whether the answer was affirmative.

    The answer and the accepted tokens are compared case-insensitively, so
    ``"OUI"`` is accepted when ``yes=["oui"]``. Anything that is not one of
    the accepted tokens, an empty answer included, counts as a no.
    """
    tokens = tuple(yes) if yes is not None else (config or PromptConfig()).yes_tokens
    answer = request_input(f"{prompt} ({'/'.join(tokens)}) ")
    return answer.strip().lower() in {token.lower() for token in tokens}
