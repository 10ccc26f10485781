"""
Contact and recruitment tracker driven by line-oriented text commands.

Subpackages:
- services: domain values, the in-memory model, JSON storage
- commands: one command class per command word
- parser: command-line syntax and per-command parsers
"""

__version__ = "0.1.0"
