"""Command implementations for the wsman CLI"""

from .list_command import list

__all__ = ["list"]
