"""Interactive encryption of a secret typed at the terminal.

The password and message are read with masked input and never written to
disk; only the hex-encoded envelope is displayed and, optionally, saved.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .main import simpleenc
from .prompts import PromptConfig, ask_question, echo, request_input, request_password

BANNER = "This is a simple encryption tool based on the AES-256 CBC algorithm."


def save_hex(path: Path, hex_text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(hex_text, encoding="utf-8")
    return path


class PromptEncryptSession:
    def __init__(self, config: Optional[PromptConfig] = None):
        self.config = config or PromptConfig()

    def _ask(self, prompt: str) -> bool:
        return ask_question(prompt, config=self.config)

    def read_password(self) -> str:
        while True:
            first = request_password("Enter password: ")
            second = request_password("Enter password again: ")
            if first != second:
                echo("Passwords don't match. Try again.", color="red")
                continue
            if len(first) < self.config.min_password_length:
                echo(f"Your password has character length {len(first)}.", color="yellow")
                if self._ask("Are you sure it's enough?"):
                    return first
                continue
            echo()
            return first

    def read_message(self) -> str:
        while True:
            first = request_password("Enter message: ")
            second = request_password("Enter message again: ")
            if first == second:
                return first
            echo("Messages don't match. Try again.", color="red")

    def offer_save(self, hex_text: str) -> Optional[Path]:
        """Ask for a destination and write ``hex_text`` there.

        Returns the saved path, or ``None`` when the user declines or leaves
        the path empty.
        """
        wants_file = self._ask("Would you like to save the encrypted message to a file?")
        echo()
        if not wants_file:
            return None
        while True:
            raw_path = request_input("Please specify a file path (leave empty to cancel): ")
            if not raw_path:
                return None
            path = Path(raw_path).expanduser().resolve()
            if path.is_dir():
                echo(f"'{path}' is a directory", color="red")
                continue
            if path.exists() and not self._ask(f"'{path}' already exists. Do you want to override it?"):
                continue
            save_hex(path, hex_text)
            echo("\nFile successfully saved:")
            echo(str(path), color="green")
            return path

    def run(self) -> int:
        echo(f"\n{BANNER}\n")
        password = self.read_password()
        message = self.read_message()
        hex_text = simpleenc.encrypt_hex(message, password)
        echo("\nHere's your hex-encoded encrypted message:")
        echo(hex_text, color="green")
        self.offer_save(hex_text)
        return 0


def main(argv=None) -> int:
    try:
        return PromptEncryptSession().run()
    except KeyboardInterrupt:
        echo("\nAborted.", color="red", error=True)
        return 130
    except Exception as exc:
        echo(f"Error: {exc}", color="red", error=True)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
