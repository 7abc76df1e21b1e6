"""
msgshell.interfaces.cli - Command line interface for msgshell

This package contains:
- main: argparse entry point
- dispatch: command line -> registered command
- commands: the command implementations
"""
