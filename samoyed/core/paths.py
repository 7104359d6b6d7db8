"""
SAMOYED - Path Validator
Garante que o diretório de instalação fica dentro do repositório.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..config import HOOKS_SUBDIR
from .platform_utils import to_git_path


# =============================================================================
# Exceções
# =============================================================================

class PathValidationError(Exception):
    """Diretório de instalação inválido."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Caminho inválido '{path}': {message}")


class EmptyPath(PathValidationError):
    """Caminho vazio ou só espaços."""

    def __init__(self, path: str):
        super().__init__(path, "caminho vazio")


class TraversalRejected(PathValidationError):
    """Caminho contém segmento '..'."""

    def __init__(self, path: str):
        super().__init__(path, "segmentos '..' não são permitidos")


class OutsideRepository(PathValidationError):
    """Caminho resolve para fora da raiz do repositório."""

    def __init__(self, path: str, repo_root: Path):
        self.repo_root = repo_root
        super().__init__(path, f"fica fora do repositório ({repo_root})")


class ParentMissing(PathValidationError):
    """Nenhum ancestral existente a partir do qual canonicalizar."""

    def __init__(self, path: str, detail: str):
        super().__init__(path, detail)


# =============================================================================
# Validated Target
# =============================================================================

@dataclass(frozen=True)
class ValidatedTarget:
    """Diretório de instalação já validado (absoluto e canônico)."""
    path: Path
    repo_root: Path

    @property
    def hooks_dir(self) -> Path:
        """Diretório dos stubs (<target>/_)."""
        return self.path / HOOKS_SUBDIR

    @property
    def relative(self) -> Path:
        return self.path.relative_to(self.repo_root)

    @property
    def git_hooks_path(self) -> str:
        """Valor para core.hooksPath, relativo à raiz e com barras normais."""
        rel = self.relative / HOOKS_SUBDIR
        return to_git_path(rel)


# =============================================================================
# Validator
# =============================================================================

_SEPARATORS = re.compile(r"[\\/]+")


def has_traversal(candidate: str) -> bool:
    """Checagem léxica: algum segmento é exatamente '..'?"""
    return any(segment == ".." for segment in _SEPARATORS.split(candidate))


class PathValidator:
    """
    Valida o diretório de instalação.

    Regras (nesta ordem):
    - Rejeita caminhos vazios
    - Rejeita '..' lexicalmente, antes de qualquer acesso a disco
    - Junta caminhos relativos ao diretório de trabalho da invocação
    - Canonicaliza a partir do ancestral existente mais próximo
    - Exige que o resultado seja a raiz ou descendente dela
    """

    def validate(
        self,
        repo_root: Union[str, Path],
        candidate: Union[str, Path],
        cwd: Optional[Union[str, Path]] = None,
    ) -> ValidatedTarget:
        """
        Args:
            repo_root: Raiz do repositório (precisa existir)
            candidate: Caminho pedido pelo usuário
            cwd: Diretório de trabalho da invocação (default: os.getcwd())

        Returns:
            ValidatedTarget

        Raises:
            EmptyPath, TraversalRejected, OutsideRepository, ParentMissing
        """
        raw = str(candidate)

        if not raw.strip():
            raise EmptyPath(raw)

        if has_traversal(raw):
            raise TraversalRejected(raw)

        try:
            root = Path(repo_root).resolve(strict=True)
        except (OSError, RuntimeError):
            raise ParentMissing(raw, f"raiz do repositório não existe: {repo_root}")

        prospective = Path(raw)
        if not prospective.is_absolute():
            base = Path(cwd) if cwd is not None else Path(os.getcwd())
            prospective = base / prospective

        canonical = self._canonicalize(raw, prospective)

        if canonical != root and root not in canonical.parents:
            raise OutsideRepository(raw, root)

        return ValidatedTarget(path=canonical, repo_root=root)

    def _canonicalize(self, raw: str, prospective: Path) -> Path:
        """Resolve o ancestral existente mais próximo e reanexa o resto."""
        missing: List[str] = []
        current = prospective

        while not current.exists():
            missing.append(current.name)
            parent = current.parent
            if parent == current:
                raise ParentMissing(raw, "nenhum diretório ancestral existe")
            current = parent

        if missing and not current.is_dir():
            raise ParentMissing(raw, f"ancestral não é um diretório: {current}")

        try:
            base = current.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise ParentMissing(raw, f"não foi possível resolver {current}: {e}")

        return base.joinpath(*reversed(missing))


__all__ = [
    "PathValidationError",
    "EmptyPath",
    "TraversalRejected",
    "OutsideRepository",
    "ParentMissing",
    "ValidatedTarget",
    "PathValidator",
    "has_traversal",
]
