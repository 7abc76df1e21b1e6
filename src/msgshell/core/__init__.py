"""
msgshell.core - Core functionality for msgshell

This package contains fundamental components:
- formatter: The message formatting operation
- config: Configuration management
- exceptions: Exception hierarchy
- logging: Logging setup and utilities
"""
