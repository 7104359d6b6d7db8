"""
SAMOYED - Scaffold Writer
Cria a árvore de hooks: <target>/_/{.gitignore, wrapper, stubs} e o hook de exemplo.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config import SAMPLE_HOOK, WRAPPER_NAME
from ..core.environment import FileSystem, SystemFileSystem
from ..core.models import HookName
from ..core.paths import ValidatedTarget
from ..core.platform_utils import normalize_line_endings
from ..logging import get_logger, sanitize_path
from .templates import (
    GITIGNORE_TEMPLATE,
    HOOK_STUB_TEMPLATE,
    SAMPLE_HOOK_TEMPLATE,
    WRAPPER_TEMPLATE,
)

logger = get_logger("scaffold")


# =============================================================================
# Exceptions
# =============================================================================

class FilesystemError(Exception):
    """Falha de filesystem no meio do scaffolding (rerodar init completa)."""

    def __init__(self, operation: str, path: Path, cause: OSError):
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"Falha ao {operation} {path}: {cause}")


# =============================================================================
# Scaffold Writer
# =============================================================================

@dataclass
class ScaffoldReport:
    """O que foi escrito numa execução."""
    stubs: List[str] = field(default_factory=list)
    sample_created: bool = False


class ScaffoldWriter:
    """
    Escreve os arquivos gerados, sempre na mesma ordem:

    1. <target>/ e <target>/_/
    2. <target>/_/.gitignore
    3. <target>/_/<wrapper>
    4. <target>/_/<hook> para cada um dos 14 hooks
    5. <target>/pre-commit (só se ainda não existir)

    Tudo em _/ é regenerado a cada execução com conteúdo idêntico.
    """

    def __init__(self, fs: Optional[FileSystem] = None):
        self.fs = fs or SystemFileSystem()

    def write(self, target: ValidatedTarget) -> ScaffoldReport:
        """
        Args:
            target: Diretório de instalação já validado

        Returns:
            ScaffoldReport

        Raises:
            FilesystemError: Se alguma operação falhar (escritas anteriores ficam)
        """
        report = ScaffoldReport()
        hooks_dir = target.hooks_dir

        self._create_dir(target.path)
        self._create_dir(hooks_dir)

        self._write_file(hooks_dir / ".gitignore", GITIGNORE_TEMPLATE)
        self._write_file(hooks_dir / WRAPPER_NAME, WRAPPER_TEMPLATE, executable=True)

        for hook in HookName:
            self._write_file(hooks_dir / hook.value, HOOK_STUB_TEMPLATE, executable=True)
            report.stubs.append(hook.value)

        report.sample_created = self._write_sample(target.path / SAMPLE_HOOK)

        logger.debug(
            "scaffolded %d stubs in %s", len(report.stubs), sanitize_path(hooks_dir)
        )
        return report

    def _write_sample(self, path: Path) -> bool:
        """Hook de exemplo: nunca sobrescreve edições do usuário."""
        if self.fs.exists(path):
            logger.debug("sample hook kept: %s", sanitize_path(path))
            return False

        self._write_file(path, SAMPLE_HOOK_TEMPLATE, executable=True)
        return True

    def _create_dir(self, path: Path) -> None:
        try:
            self.fs.create_dir(path)
        except OSError as e:
            raise FilesystemError("criar diretório", path, e)

    def _write_file(self, path: Path, content: str, executable: bool = False) -> None:
        try:
            self.fs.write_text(path, normalize_line_endings(content))
        except OSError as e:
            raise FilesystemError("escrever", path, e)

        if executable:
            try:
                self.fs.set_executable(path)
            except OSError as e:
                raise FilesystemError("tornar executável", path, e)


__all__ = [
    "FilesystemError",
    "ScaffoldReport",
    "ScaffoldWriter",
]
