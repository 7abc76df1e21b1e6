import argparse
import shlex
import sys
from msgshell.batch.runner import BatchRunner
from msgshell.core import logging
from msgshell.core.config import load_config
from msgshell.core.exceptions import ConfigError, ScriptFileNotFoundError
from msgshell.core.logging import ComponentType, LogLevel, LogMessage, log_event
from msgshell.interfaces.cli.commands.registry import register_builtin_commands
from msgshell.interfaces.cli.dispatch import CommandDispatcher
from msgshell.version import __version__

logger = logging.get_logger(__name__)

EXIT_COMMAND = "exit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="msgshell command host",
        prog="msgshell",
    )
    parser.add_argument(
        "--config",
        metavar="CONFIG",
        type=str,
        default=None,
        help="Path to an optional configuration YAML file."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Single command subcommand
    run_parser = subparsers.add_parser("run", help="Run a single command line, e.g. /write-message hello")
    run_parser.add_argument(
        "command_line",
        metavar="COMMAND_LINE",
        nargs=argparse.REMAINDER,
        help="The command name followed by its arguments; words starting with - are passed through."
    )

    # Batch mode subcommand
    batch_parser = subparsers.add_parser("batch", help="Run a batch script of command lines")
    batch_parser.add_argument(
        "script",
        metavar="SCRIPT",
        type=str,
        help="Path to the batch script to execute."
    )
    batch_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Echo commands only, do not execute them."
    )
    batch_parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop at the first command that fails."
    )

    subparsers.add_parser("interactive", help="Read command lines from stdin until EOF or /exit")
    return parser


def print_result(result: dict) -> bool:
    """Writes a dispatch result to stdout or stderr. Returns True on success."""
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return False
    output = result.get("output")
    if output is not None:
        print(output)
    return True


def quote_word(word: str) -> str:
    # Only the value of --key=value is quoted so the word stays an option
    if word.startswith("--") and "=" in word:
        key, value = word.split("=", 1)
        return shlex.quote(key) + "=" + shlex.quote(value)
    return shlex.quote(word)


def join_command_line(words) -> str:
    """
    Rebuilds one command line from argv words. Words after the first are
    re-quoted so an argument the shell already grouped stays one argument.
    """
    if len(words) == 1:
        return words[0]
    return words[0] + " " + " ".join(quote_word(w) for w in words[1:])


def run_single(dispatcher: CommandDispatcher, words) -> int:
    ok = print_result(dispatcher.dispatch(join_command_line(words)))
    return 0 if ok else 1


def run_batch(dispatcher: CommandDispatcher, script: str, dry_run: bool, stop_on_error: bool) -> int:
    runner = BatchRunner(script, dispatcher, dry_run=dry_run, stop_on_error=stop_on_error)
    try:
        results = runner.run()
    except ScriptFileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    failures = 0
    for _line, result in results:
        if not print_result(result):
            failures += 1
    if failures:
        logger.warning(f"{failures} of {len(results)} batch commands failed")
        return 1
    return 0


def run_interactive(dispatcher: CommandDispatcher, stream=None) -> int:
    stream = stream or sys.stdin
    for raw_line in stream:
        line = raw_line.strip()
        if not line:
            continue
        if line == dispatcher.prefix + EXIT_COMMAND:
            break
        print_result(dispatcher.dispatch(line))
    return 0


def cli(args=None):
    """Main entry point for the msgshell CLI application."""
    parser = build_parser()

    if args is not None:
        parsed_args = parser.parse_args(args)
    else:
        parsed_args = parser.parse_args()

    # If no command is provided, print help and exit
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)
    if parsed_args.command == "run" and not parsed_args.command_line:
        parser.error("the following arguments are required: COMMAND_LINE")

    # Load config and .env before logging so the configured level applies
    try:
        config = load_config(parsed_args.config)
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(2)

    logging.setup_logging(config.get("logging"))
    logger.debug(f"Configuration: {config}")

    register_builtin_commands()
    dispatcher = CommandDispatcher(prefix=config["command_prefix"])

    log_event(
        LogMessage(
            level=LogLevel.DEBUG,
            component=ComponentType.CLI,
            action="cli_started",
            event_summary=f"Running subcommand {parsed_args.command}",
            details={"config_path": config.get("config_path")},
        ),
        logger_name=__name__,
    )

    if parsed_args.command == "run":
        exit_code = run_single(dispatcher, parsed_args.command_line)
    elif parsed_args.command == "batch":
        exit_code = run_batch(dispatcher, parsed_args.script, parsed_args.dry_run, parsed_args.stop_on_error)
    elif parsed_args.command == "interactive":
        exit_code = run_interactive(dispatcher)
    else:
        parser.print_help()
        exit_code = 1
    sys.exit(exit_code)


def main():
    """Standard Python main function entry point."""
    cli()


if __name__ == "__main__":
    main()
