"""
Per-invocation CLI state, stored on the Typer context object.
"""

from dataclasses import dataclass

from vespa_cli.cli.output import OutputContext
from vespa_cli.core.config import ServiceKind, resolve_target


@dataclass
class CliState:
    output: OutputContext
    target: str
    application: str | None = None

    def target_url(self, kind: ServiceKind) -> str:
        """
        Base URL of one service of the selected target.

        Raises:
            ConfigError: If the target cannot be resolved
        """
        return resolve_target(self.target, kind)
