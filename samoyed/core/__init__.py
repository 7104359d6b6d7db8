"""Core modules for SAMOYED: models, paths, config and environment seams."""

from .config_loader import ConfigLoader, ConfigLoadError, ConfigTable
from .environment import FileSystem, ProcessResult, ProcessRunner
from .models import (
    ActionKind,
    EnvironmentMode,
    HookName,
    InstallResult,
    ResolvedAction,
)
from .paths import PathValidationError, PathValidator, ValidatedTarget

__all__ = [
    # Models
    "ActionKind",
    "EnvironmentMode",
    "HookName",
    "InstallResult",
    "ResolvedAction",
    # Paths
    "PathValidationError",
    "PathValidator",
    "ValidatedTarget",
    # Config
    "ConfigLoader",
    "ConfigLoadError",
    "ConfigTable",
    # Seams
    "FileSystem",
    "ProcessResult",
    "ProcessRunner",
]
