# -*- coding: utf-8 -*-
"""
msgshell package initialization.
"""

from .version import __version__
from .core.formatter import MessageFormatter, MessageRequest, format_message

__all__ = [
    '__version__',
    'MessageFormatter',
    'MessageRequest',
    'format_message',
]
