"""
SAMOYED - Environment Seams
Abstrações mínimas de processo e filesystem, para que o instalador e o
dispatcher possam ser testados sem git, sem shell e sem disco.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .platform_utils import is_executable, make_executable


# =============================================================================
# Process Runner
# =============================================================================

@dataclass
class ProcessResult:
    """Resultado de um processo executado."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner:
    """Interface: executa programa + args e devolve o exit status."""

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[Path] = None,
        capture: bool = True,
    ) -> ProcessResult:
        """
        Executa um processo.

        Args:
            args: Programa e argumentos
            cwd: Diretório de trabalho (default: atual)
            capture: Se True, captura stdout/stderr; se False, herda os streams

        Returns:
            ProcessResult

        Raises:
            FileNotFoundError: Se o programa não existir
        """
        raise NotImplementedError


class SystemProcessRunner(ProcessRunner):
    """Implementação real via subprocess."""

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[Path] = None,
        capture: bool = True,
    ) -> ProcessResult:
        argv: List[str] = [str(a) for a in args]

        if capture:
            result = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
            return ProcessResult(result.returncode, result.stdout, result.stderr)

        result = subprocess.run(argv, cwd=cwd, check=False)
        return ProcessResult(result.returncode)


# =============================================================================
# File System
# =============================================================================

class FileSystem:
    """Interface: operações de filesystem usadas pelo SAMOYED."""

    def exists(self, path: Path) -> bool:
        raise NotImplementedError

    def is_dir(self, path: Path) -> bool:
        raise NotImplementedError

    def is_file(self, path: Path) -> bool:
        raise NotImplementedError

    def create_dir(self, path: Path) -> None:
        """Cria o diretório (e pais). Não falha se já existir."""
        raise NotImplementedError

    def write_text(self, path: Path, content: str) -> None:
        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        raise NotImplementedError

    def set_executable(self, path: Path) -> None:
        raise NotImplementedError

    def is_executable(self, path: Path) -> bool:
        raise NotImplementedError


class SystemFileSystem(FileSystem):
    """Implementação real via pathlib."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: Path) -> bool:
        return Path(path).is_file()

    def create_dir(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        # newline="" keeps LF endings on Windows
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def set_executable(self, path: Path) -> None:
        make_executable(Path(path))

    def is_executable(self, path: Path) -> bool:
        return is_executable(Path(path))


__all__ = [
    "ProcessResult",
    "ProcessRunner",
    "SystemProcessRunner",
    "FileSystem",
    "SystemFileSystem",
]
