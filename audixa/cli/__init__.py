"""Audixa CLI.

Registers all commands on the main group.
"""

from audixa.cli.main import cli
from audixa.cli.tts import generate, status
from audixa.cli.voices import voices

__all__ = [
    "cli",
    "generate",
    "status",
    "voices",
]
