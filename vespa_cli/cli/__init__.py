"""
CLI Client Module.

Command-line client built with Typer for sending document operations and
status checks to a Vespa application.

Architecture:
- Commands are a thin presentation layer over vespa_cli.document
- HTTP goes through ServiceClient (httpx)
- Output goes through one OutputContext per invocation (rich)

Usage:
    vespa --help
    vespa document put id:mynamespace:music::a-head-full-of-dreams song.json
    vespa document get id:mynamespace:music::a-head-full-of-dreams
    vespa status document
"""
