"""
Command dispatch for the msgshell host.

A command line is the configured prefix, the command name, and an optional
argument string separated from the name by a single space:

    /write-message "hello world"

Results are plain dicts: {"output": ...} on success, {"error": ...} otherwise.
"""

import logging
import time
from typing import Any, Dict, Optional

from msgshell.core.config import DEFAULT_COMMAND_PREFIX
from msgshell.core.exceptions import CommandError
from msgshell.core.logging import ComponentType, LogLevel, LogMessage, log_event
from msgshell.interfaces.cli.commands.registry import CommandRegistry

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Looks up commands in the CommandRegistry and runs them."""

    def __init__(self, prefix: str = DEFAULT_COMMAND_PREFIX):
        self.prefix = prefix

    def split(self, command_str: str):
        """Returns (name, args) for a prefixed command line."""
        parts = command_str[len(self.prefix):].split(" ", 1)
        cmd_name = parts[0]
        cmd_args = parts[1] if len(parts) > 1 else ""
        return cmd_name, cmd_args

    def dispatch(self, command_str: str, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not command_str.startswith(self.prefix):
            return {"error": f"Invalid command format. Must start with {self.prefix}"}
        cmd_name, cmd_args = self.split(command_str)
        cmd_cls = CommandRegistry.get(cmd_name)
        if not cmd_cls:
            return {"error": f"Unknown command: {cmd_name}"}

        run_context = dict(context or {})
        run_context["prefix"] = self.prefix

        cmd = cmd_cls()
        start = time.monotonic()
        try:
            result = cmd.run(cmd_args, context=run_context)
        except CommandError as ce:
            self._log(cmd_name, start, LogLevel.WARNING, f"Command {cmd_name} failed: {ce}", ok=False)
            return {"error": str(ce)}
        except Exception as e:
            logger.exception(f"Unexpected error running command {cmd_name}")
            self._log(cmd_name, start, LogLevel.ERROR, f"Command {cmd_name} raised: {e}", ok=False)
            return {"error": f"Command error: {str(e)}"}

        self._log(cmd_name, start, LogLevel.DEBUG, f"Command {cmd_name} completed", ok=True)
        return {"output": result}

    def _log(self, cmd_name: str, start: float, level: LogLevel, summary: str, ok: bool):
        log_event(
            LogMessage(
                level=level,
                component=ComponentType.DISPATCHER,
                action="command_dispatched",
                event_summary=summary,
                command=cmd_name,
                duration_ms=(time.monotonic() - start) * 1000,
                details={"success": ok},
            ),
            logger_name=__name__,
        )
