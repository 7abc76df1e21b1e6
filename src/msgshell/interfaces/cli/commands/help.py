from msgshell.core.exceptions import CommandError
from msgshell.interfaces.cli.commands.base import Command
from msgshell.interfaces.cli.commands.registry import CommandRegistry


class HelpCommand(Command):
    name = 'help'
    description = 'Show help for all commands or a specific command.'
    usage = 'help [command]'

    def run(self, args: str, context=None):
        prefix = (context or {}).get('prefix', '/')
        parsed = self.parse_args(args)
        commands = CommandRegistry.all()
        if parsed['args']:
            cmd_name = parsed['args'][0]
            if cmd_name.startswith(prefix):
                cmd_name = cmd_name[len(prefix):]
            cmd_cls = commands.get(cmd_name)
            if not cmd_cls:
                raise CommandError(f"Unknown command: {cmd_name}")
            desc = getattr(cmd_cls, 'description', '') or '(no description)'
            lines = [f"{prefix}{cmd_name}: {desc}"]
            usage = getattr(cmd_cls, 'usage', '')
            if usage:
                lines.append(f"Usage: {prefix}{usage}")
            return '\n'.join(lines)
        else:
            lines = ["Available commands:"]
            for name, cls in sorted(commands.items()):
                desc = getattr(cls, 'description', '') or '(no description)'
                lines.append(f"{prefix}{name}: {desc}")
            return '\n'.join(lines)


COMMAND = HelpCommand

# Register the command
CommandRegistry.register(HelpCommand)
