"""
msgshell.interfaces.cli.commands - CLI command implementations

This package contains specific command implementations:
- write_message: Echo a message back with a confirmation label
- help: Help system
"""

from msgshell.interfaces.cli.commands.base import Command
from msgshell.interfaces.cli.commands.registry import CommandRegistry, register_builtin_commands

__all__ = ['Command', 'CommandRegistry', 'register_builtin_commands']
