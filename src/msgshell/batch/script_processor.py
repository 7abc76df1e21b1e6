"""
Script loading for msgshell batch mode.

A script is a text file with one command line per line. Blank lines and
lines starting with '#' are skipped; surrounding whitespace is stripped.
"""

import os
import logging
from typing import Iterator, List, NamedTuple

from msgshell.core.exceptions import ScriptFileNotFoundError

logger = logging.getLogger(__name__)


class ScriptLine(NamedTuple):
    line_num: int
    command: str


class ScriptProcessor:
    """Loads a batch script into numbered command lines."""

    def __init__(self, script_path: str):
        self.script_path = script_path
        self.lines: List[ScriptLine] = []
        self.loaded = False

    def load_script(self) -> None:
        """
        Load and parse the script file.

        Raises:
            ScriptFileNotFoundError: If script file doesn't exist
            OSError: If file cannot be read
        """
        if not os.path.isfile(self.script_path):
            raise ScriptFileNotFoundError(f"Script file not found: {self.script_path}")

        logger.info(f"Loading script from: {self.script_path}")
        with open(self.script_path, 'r', encoding='utf-8') as f:
            self.lines = [
                ScriptLine(line_num, stripped)
                for line_num, stripped in enumerate((line.strip() for line in f), 1)
                if stripped and not stripped.startswith('#')
            ]
        self.loaded = True
        logger.info(f"Loaded {len(self.lines)} commands from script")

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[ScriptLine]:
        if not self.loaded:
            raise RuntimeError("Script not loaded. Call load_script() first.")
        return iter(self.lines)
