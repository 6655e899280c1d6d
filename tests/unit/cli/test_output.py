"""Unit tests for terminal output."""

import io

from rich.console import Console

from vespa_cli.cli.output import ColorMode, OutputContext


def make_output() -> tuple[OutputContext, io.StringIO, io.StringIO]:
    out_buffer, err_buffer = io.StringIO(), io.StringIO()
    output = OutputContext(
        out=Console(file=out_buffer, color_system=None, soft_wrap=True, markup=False, highlight=False, emoji=False),
        err=Console(file=err_buffer, color_system=None, soft_wrap=True, markup=False, highlight=False, emoji=False),
    )
    return output, out_buffer, err_buffer


class TestOutputContext:
    """Tests for the stdout/stderr sinks."""

    def test_success_goes_to_stdout(self) -> None:
        """Test success lines go to stdout."""
        output, out_buffer, err_buffer = make_output()

        output.success("Sent id:mynamespace:music::a")

        assert out_buffer.getvalue() == "Success: Sent id:mynamespace:music::a\n"
        assert err_buffer.getvalue() == ""

    def test_error_goes_to_stderr(self) -> None:
        """Test error lines go to stderr."""
        output, out_buffer, err_buffer = make_output()

        output.error("Invalid document operation: Status 400\n\n[bad]")

        assert err_buffer.getvalue() == "Error: Invalid document operation: Status 400\n\n[bad]\n"
        assert out_buffer.getvalue() == ""

    def test_bodies_are_not_interpreted_as_markup(self) -> None:
        """Test brackets and emoji codes print verbatim."""
        output, out_buffer, _ = make_output()

        output.line('{"text": "[bold]x[/bold] :smile:"}')

        assert out_buffer.getvalue() == '{"text": "[bold]x[/bold] :smile:"}\n'

    def test_not_interactive_without_terminal(self) -> None:
        """Test a file console is not interactive."""
        output, _, _ = make_output()
        assert not output.interactive

    def test_create_builds_fresh_consoles(self) -> None:
        """Test each invocation gets its own consoles."""
        first = OutputContext.create(ColorMode.NEVER)
        second = OutputContext.create(ColorMode.NEVER)

        assert first.out is not second.out
        assert first.err is not first.out
        assert first.err.stderr
        assert not first.out.stderr

    def test_always_forces_terminal(self) -> None:
        """Test --color always makes stderr interactive."""
        output = OutputContext.create(ColorMode.ALWAYS)
        assert output.interactive
