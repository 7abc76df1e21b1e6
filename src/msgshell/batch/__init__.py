"""
Batch mode for msgshell: run a file of command lines.
"""

from .script_processor import ScriptLine, ScriptProcessor
from .runner import BatchRunner

__all__ = ['ScriptLine', 'ScriptProcessor', 'BatchRunner']
