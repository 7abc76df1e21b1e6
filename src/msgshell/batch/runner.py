import logging
from typing import Any, Dict, List, Tuple

from msgshell.batch.script_processor import ScriptProcessor
from msgshell.core.logging import ComponentType, LogLevel, LogMessage, log_event
from msgshell.interfaces.cli.dispatch import CommandDispatcher

logger = logging.getLogger(__name__)


class BatchRunner:
    """Runs every command line of a batch script through a dispatcher."""

    def __init__(self, script_path: str, dispatcher: CommandDispatcher, dry_run: bool = False,
                 stop_on_error: bool = False):
        self.script_path = script_path
        self.dispatcher = dispatcher
        self.dry_run = dry_run
        self.stop_on_error = stop_on_error
        self.processor = ScriptProcessor(script_path)

    def run(self) -> List[Tuple[str, Dict[str, Any]]]:
        """
        Load the script and execute it line by line.

        Returns:
            A list of (command line, result) pairs in script order. In dry-run
            mode every result is {"output": <command line>}.

        Raises:
            ScriptFileNotFoundError: If the script file doesn't exist
        """
        self.processor.load_script()
        log_event(
            LogMessage(
                level=LogLevel.INFO,
                component=ComponentType.BATCH,
                action="script_loaded",
                event_summary=f"Running {len(self.processor)} commands from {self.script_path}",
                details={"dry_run": self.dry_run},
            ),
            logger_name=__name__,
        )

        results = []
        for line_num, command in self.processor:
            if self.dry_run:
                result = {"output": command}
            else:
                result = self.dispatcher.dispatch(command, context={"script": self.script_path})
            results.append((command, result))
            if "error" in result:
                logger.warning(f"{self.script_path}:{line_num}: {result['error']}")
                if self.stop_on_error:
                    break
        return results
