"""
Terminal Output.

OutputContext bundles the two sinks of one CLI invocation: stdout for
results and stderr for errors and progress. It is created once per
invocation and passed to the code that writes to the terminal, so no
console or color setting is shared between invocations.

All text is printed without markup parsing, highlighting or wrapping:
response bodies are shown exactly as received.
"""

from dataclasses import dataclass
from enum import Enum

from rich.console import Console
from rich.text import Text


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _make_console(stderr: bool, color: ColorMode) -> Console:
    force_terminal = True if color is ColorMode.ALWAYS else None
    return Console(
        stderr=stderr,
        force_terminal=force_terminal,
        no_color=color is ColorMode.NEVER,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )


@dataclass
class OutputContext:
    out: Console
    err: Console

    @classmethod
    def create(cls, color: ColorMode = ColorMode.AUTO) -> "OutputContext":
        """Build consoles bound to the process stdout and stderr."""
        return cls(out=_make_console(False, color), err=_make_console(True, color))

    @property
    def interactive(self) -> bool:
        """True when progress can be animated on the error sink."""
        return self.err.is_terminal

    def success(self, message: str) -> None:
        self.out.print(Text.assemble(("Success: ", "green"), message))

    def error(self, message: str) -> None:
        self.err.print(Text.assemble(("Error: ", "red"), message))

    def line(self, text: str | Text = "") -> None:
        """Print one line of plain output to stdout."""
        self.out.print(text)

    def diagnostic(self, text: str) -> None:
        """Print one line of plain output to stderr."""
        self.err.print(Text(text))
