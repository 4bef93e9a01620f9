"""Thin interactive front-end.

``ConsoleApp`` plays the role a web framework plays for a web app: feature
controllers register numbered menu commands on it and it runs the loop,
turning domain errors into printed messages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TextIO

from rich.console import Console
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.table import Table

from .core.exceptions import DomainError

logger = logging.getLogger(__name__)

EXIT_KEY = "0"


@dataclass(frozen=True)
class MenuCommand:
    key: str
    label: str
    handler: Callable[[], None]


class _LineReader:
    """Input stream adapter that signals end of input like the terminal does."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line


class ConsoleApp:
    def __init__(
        self,
        title: str,
        *,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        debug: bool = False,
    ):
        self.title = title
        self.console = console or Console()
        self.debug = debug
        self._stream = _LineReader(input_stream) if input_stream is not None else None
        self._commands: dict[str, MenuCommand] = {}

    def command(self, key: str, label: str):
        """Register the decorated function under menu entry ``key``."""

        def decorator(handler: Callable[[], None]) -> Callable[[], None]:
            if key == EXIT_KEY or key in self._commands:
                raise ValueError(f"Menu key {key!r} already taken")
            self._commands[key] = MenuCommand(key=key, label=label, handler=handler)
            return handler

        return decorator

    @property
    def commands(self) -> list[MenuCommand]:
        return sorted(self._commands.values(), key=lambda c: int(c.key))

    # input helpers

    def ask(self, text: str, *, default: str = "") -> str:
        return Prompt.ask(text, console=self.console, default=default, show_default=False, stream=self._stream).strip()

    def ask_int(self, text: str) -> int:
        return IntPrompt.ask(text, console=self.console, stream=self._stream)

    def ask_float(self, text: str) -> float:
        return FloatPrompt.ask(text, console=self.console, stream=self._stream)

    def confirm(self, text: str) -> bool:
        return Confirm.ask(text, console=self.console, stream=self._stream)

    # output helpers

    def say(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def table(self, title: str, columns: Iterable[str], rows: Iterable[Iterable[object]]) -> None:
        table = Table(title=title)
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(str(v) for v in row))
        self.console.print(table)

    # loop

    def render_menu(self) -> None:
        self.console.print(f"\n=== {self.title.upper()} ===", markup=False)
        for cmd in self.commands:
            self.say(f"{cmd.key}. {cmd.label}")
        self.say(f"{EXIT_KEY}. Exit")

    def dispatch(self, choice: str) -> bool:
        """Run one menu choice. Returns ``False`` once the user chose to exit."""

        choice = choice.strip()
        if choice == EXIT_KEY:
            self.say("Exiting...")
            return False

        cmd = self._commands.get(choice)
        if not cmd:
            self.say("Invalid choice!")
            return True

        try:
            cmd.handler()
        except DomainError as e:
            self.say(f"Error: {e}")
        except EOFError:
            raise
        except Exception as e:
            logger.exception("Command %r failed", cmd.label)
            if self.debug:
                self.say(f"Unexpected error: {e}")
            else:
                self.say("Unexpected error, see log for details")
        return True

    def run(self) -> None:
        while True:
            self.render_menu()
            try:
                if not self.dispatch(self.ask("Enter choice")):
                    break
            except (EOFError, KeyboardInterrupt):
                self.say("")
                break
