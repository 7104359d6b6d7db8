"""Resolução e execução de hooks disparados pelo Git."""

from .dispatcher import HookDispatcher, UnknownHookError
from .resolver import CommandResolver, fallback_script_path

__all__ = [
    "CommandResolver",
    "HookDispatcher",
    "UnknownHookError",
    "fallback_script_path",
]
