"""
Vespa command-line client.

Sends document operations and status checks to a running Vespa
application and reports the outcome on the terminal.
"""

__version__ = "0.1.0"
