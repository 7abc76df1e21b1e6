"""
Write Message Command

Binds the single mandatory 'message' parameter and returns the formatted
confirmation string.

Usage:
    /write-message <message>
    /write-message "a message with spaces"
    /write-message --message=<message>
"""

import logging

from msgshell.core.exceptions import CommandError
from msgshell.core.formatter import MessageRequest
from msgshell.interfaces.cli.commands.base import Command
from msgshell.interfaces.cli.commands.registry import CommandRegistry

logger = logging.getLogger(__name__)


class WriteMessageCommand(Command):
    name = 'write-message'
    description = 'Writes back the provided message with a confirmation label.'
    usage = 'write-message <message> | write-message --message=<message>'

    def run(self, args: str, context=None) -> str:
        parsed = self.parse_args(args)

        options = dict(parsed['options'])
        positional = parsed['args']

        named = options.pop('message', None)
        if options:
            raise CommandError(f"Unknown option(s): {', '.join('--' + k for k in sorted(options))}")
        if named is True:
            raise CommandError("Option --message requires a value: --message=<message>")

        if named is not None:
            if positional:
                raise CommandError(f"A positional parameter cannot be found that accepts argument '{positional[0]}'")
            message = named
        elif len(positional) == 1:
            message = positional[0]
        elif not positional:
            raise CommandError(f"Missing mandatory parameter 'message'. Usage: {self.usage}")
        else:
            raise CommandError(f"A positional parameter cannot be found that accepts argument '{positional[1]}'")

        logger.debug(f"[WriteMessageCommand] Formatting message of length {len(message)}")
        return MessageRequest(message).format()


COMMAND = WriteMessageCommand

# Register the command
CommandRegistry.register(WriteMessageCommand)
