"""
Progress Indicator.

Runs a blocking function while a spinner animates on the error console,
then replaces the spinner line with a final "done" or "failed" message.

The caller runs the function in its own thread; a renderer thread owns
the terminal line. The two meet at a single-slot queue that the caller
writes exactly once, after the function returned, and the renderer reads
exactly once. The caller then waits for the renderer's finished event,
so the final message is always written before the call returns and the
renderer never writes afterwards.

Usage:
    session = spinner(output, "Sending put id:ns:music::a", lambda: dispatcher.dispatch(op))
    if session.error is not None:
        ...
    outcome = session.result
"""

import queue
import threading
from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.spinner import Spinner
from rich.text import Text

from vespa_cli.cli.output import OutputContext
from vespa_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

SPINNER_TEXT_DONE = "done"
SPINNER_TEXT_FAILED = "failed"
SPINNER_NAME = "dots"
SPINNER_STYLE = "bold blue"
FRAME_INTERVAL_SECONDS = 0.1

_CLEAR_LINE = Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2))


class ProgressSession:
    """
    One spinner around one blocking call.

    Attributes:
        initial_message: Text shown before the animation frame
        done_message: Line written when the call succeeded (empty for none)
        fail_message: Line written when the call raised (empty for none)
        finished: Set by the renderer after its last write
        result: Return value of the call, None if it raised
        error: Exception raised by the call, None if it succeeded
    """

    def __init__(
        self,
        console: Console,
        initial_message: str = "",
        done_message: str = "",
        fail_message: str = "",
        interval: float = FRAME_INTERVAL_SECONDS,
    ) -> None:
        self.console = console
        self.initial_message = initial_message
        self.done_message = done_message
        self.fail_message = fail_message
        self.interval = interval
        self.finished = threading.Event()
        self.result: Any = None
        self.error: Exception | None = None
        self._completion: queue.Queue[BaseException | None] = queue.Queue(maxsize=1)

    def run(self, fn: Callable[[], Any]) -> Any:
        """
        Call fn with the spinner running and wait for the final message.

        Exceptions raised by fn are captured in self.error and reported in
        one diagnostic line; they do not propagate. KeyboardInterrupt and
        other BaseExceptions still propagate after the line is closed.

        Returns:
            The value returned by fn, or None if it raised
        """
        renderer = threading.Thread(target=self._render, name="progress-renderer", daemon=True)
        renderer.start()

        try:
            self.result = fn()
        except Exception as e:
            self.error = e
        except BaseException as e:
            self._complete(e)
            raise

        self._complete(self.error)

        if self.error is not None:
            log_with_source(logger, "cli", "debug", "Wrapped call failed", error=str(self.error))
            self.console.print(Text(f"an unexpected error occurred: {self.error}"))
        return self.result

    def _complete(self, error: BaseException | None) -> None:
        self._completion.put(error)
        self.finished.wait()

    def _render(self) -> None:
        try:
            animate = self.console.is_terminal
            frames = Spinner(SPINNER_NAME).frames
            if animate:
                self.console.show_cursor(False)
            error = self._wait_for_completion(frames if animate else None)
            final = self.done_message if error is None else self.fail_message
            if animate:
                self.console.control(_CLEAR_LINE)
                self.console.show_cursor(True)
            if final:
                self.console.print(Text(final))
        finally:
            self.finished.set()

    def _wait_for_completion(self, frames: list[str] | None) -> BaseException | None:
        if frames is None:
            return self._completion.get()

        index = 0
        while True:
            self._draw(frames[index % len(frames)])
            index += 1
            try:
                return self._completion.get(timeout=self.interval)
            except queue.Empty:
                continue

    def _draw(self, frame: str) -> None:
        self.console.control(_CLEAR_LINE)
        self.console.print(Text.assemble(self.initial_message, (frame, SPINNER_STYLE)), end="")


def _loading(
    output: OutputContext,
    initial_message: str,
    done_message: str,
    fail_message: str,
    fn: Callable[[], Any],
) -> ProgressSession:
    session = ProgressSession(output.err, initial_message, done_message, fail_message)
    session.run(fn)
    return session


def spinner(output: OutputContext, text: str, fn: Callable[[], Any]) -> ProgressSession:
    """Run fn behind a spinner labeled with text, ending in "<text> done" or "<text> failed"."""
    initial_message = text + " "
    return _loading(
        output,
        initial_message,
        initial_message + SPINNER_TEXT_DONE,
        initial_message + SPINNER_TEXT_FAILED,
        fn,
    )


def waiting(output: OutputContext, fn: Callable[[], Any]) -> ProgressSession:
    """Run fn behind an unlabeled spinner that leaves no line behind."""
    return _loading(output, "", "", "", fn)
