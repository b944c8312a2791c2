"""CLI command implementations for the cabinet-studio application.

This package contains:
- new, validate, migrate, add: create, check and edit design files
- render, prompt: drawings, exports and rendering prompts
"""

from cabinet_studio.cli.commands.design import (
    add_command,
    migrate_command,
    new_command,
    validate_command,
)
from cabinet_studio.cli.commands.output import prompt_command, render_command

__all__ = [
    "add_command",
    "migrate_command",
    "new_command",
    "prompt_command",
    "render_command",
    "validate_command",
]
