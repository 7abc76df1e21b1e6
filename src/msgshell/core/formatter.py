"""
Message formatting for the write-message command.

The formatter is pure: it never validates, trims or escapes its input.
Rejecting a missing message is the job of the command that binds the
argument (see msgshell.interfaces.cli.commands.write_message).
"""

from dataclasses import dataclass

MESSAGE_LABEL = "Your message: "


class MessageFormatter:
    """Produces a confirmation string from user input."""

    label: str = MESSAGE_LABEL

    def format(self, message: str) -> str:
        return self.label + message


_formatter = MessageFormatter()


def format_message(message: str) -> str:
    """Module-level shortcut for MessageFormatter().format(message)."""
    return _formatter.format(message)


@dataclass(frozen=True)
class MessageRequest:
    """A single write-message invocation."""

    message: str

    def format(self) -> str:
        return format_message(self.message)
