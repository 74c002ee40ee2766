"""Operator confirmation prompts."""

from typing import Protocol

from rich.console import Console


class Prompter(Protocol):
    """Reads one line of operator input, blocking until it arrives."""

    def prompt_line(self, message: str) -> str:
        ...


class ConsolePrompter:
    """Prompter reading from the terminal through a Rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def prompt_line(self, message: str) -> str:
        # Messages carry paths, so print them unwrapped and without markup
        self.console.print(message, markup=False, highlight=False, soft_wrap=True, end="")
        try:
            # Console.input returns the raw line so answers can be compared literally
            return self.console.input()
        except EOFError:
            # Closed stdin reads as an empty answer, which declines
            self.console.print()
            return ""


def confirm(prompter: Prompter, message: str, affirmative_token: str = "y") -> bool:
    """Ask a yes/no question; only an exact match of the token counts as yes."""
    return prompter.prompt_line(message) == affirmative_token
