import importlib
from typing import Dict, Optional, Type
from msgshell.interfaces.cli.commands.base import Command

BUILTIN_COMMAND_MODULES = [
    'msgshell.interfaces.cli.commands.write_message',
    'msgshell.interfaces.cli.commands.help',
]


class CommandRegistry:
    """
    Registry for all available commands.
    """
    _commands: Dict[str, Type[Command]] = {}

    @classmethod
    def register(cls, command_cls: Type[Command]):
        name = getattr(command_cls, 'name', None)
        if not name:
            raise ValueError('Command class must have a name attribute')
        cls._commands[name] = command_cls

    @classmethod
    def unregister(cls, name: str):
        cls._commands.pop(name, None)

    @classmethod
    def get(cls, name: str) -> Optional[Type[Command]]:
        return cls._commands.get(name)

    @classmethod
    def all(cls) -> Dict[str, Type[Command]]:
        return dict(cls._commands)


def register_builtin_commands():
    """
    Import the built-in command modules so each one registers itself.
    A module that is already imported has its command registered again if it went missing.
    """
    for module_name in BUILTIN_COMMAND_MODULES:
        module = importlib.import_module(module_name)
        command_cls = getattr(module, 'COMMAND', None)
        if command_cls is not None and CommandRegistry.get(command_cls.name) is None:
            CommandRegistry.register(command_cls)
