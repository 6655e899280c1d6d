"""
CLI Commands.

Organized by domain/feature area.
"""

from vespa_cli.cli.commands.config import app as config_app
from vespa_cli.cli.commands.document import document as document_command
from vespa_cli.cli.commands.status import status as status_command
from vespa_cli.cli.commands.version import version as version_command

__all__ = [
    "config_app",
    "document_command",
    "status_command",
    "version_command",
]
