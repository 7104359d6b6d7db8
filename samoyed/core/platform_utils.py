"""
SAMOYED - Platform Helpers
Diferenças entre POSIX e Windows isoladas em funções de mesma assinatura.
"""

import os
import stat
from pathlib import Path, PurePath
from typing import Union


IS_WINDOWS = os.name == "nt"


def normalize_line_endings(content: str) -> str:
    """Converte CRLF e CR soltos em LF (scripts gerados rodam em sh)."""
    return content.replace("\r\n", "\n").replace("\r", "\n")


if IS_WINDOWS:

    def make_executable(path: Path) -> None:
        """Sem modelo de permissões POSIX: nada a fazer."""
        return None

    def is_executable(path: Path) -> bool:
        return path.is_file()

    def to_git_path(path: Union[str, PurePath]) -> str:
        """Git config usa barras normais mesmo no Windows."""
        return str(path).replace("\\", "/")

else:

    def make_executable(path: Path) -> None:
        """Adiciona bits de execução (u+x, g+x, o+x)."""
        mode = path.stat().st_mode
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def is_executable(path: Path) -> bool:
        return path.is_file() and os.access(path, os.X_OK)

    def to_git_path(path: Union[str, PurePath]) -> str:
        return PurePath(path).as_posix()


__all__ = [
    "IS_WINDOWS",
    "normalize_line_endings",
    "make_executable",
    "is_executable",
    "to_git_path",
]
