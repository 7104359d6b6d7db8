"""Git hooks installation and scaffolding."""

from .install import (
    HookInstaller,
    check_hooks_status,
    install_hooks,
)
from .scaffold import FilesystemError, ScaffoldWriter

__all__ = [
    "FilesystemError",
    "HookInstaller",
    "ScaffoldWriter",
    "check_hooks_status",
    "install_hooks",
]
