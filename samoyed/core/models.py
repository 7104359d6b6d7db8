"""
SAMOYED - Core Data Models
Estruturas de dados fundamentais do instalador e do dispatcher de hooks.

Author: Vinícius Lisboa <contato@viniciuslisboa.com.br>
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional

from ..config import ENV_VAR


# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_COMMAND_NOT_FOUND = 127


# =============================================================================
# Enums
# =============================================================================

class HookName(str, Enum):
    """Hooks client-side do Git gerenciados pelo SAMOYED (conjunto fechado)."""
    PRE_COMMIT = "pre-commit"
    PRE_MERGE_COMMIT = "pre-merge-commit"
    PREPARE_COMMIT_MSG = "prepare-commit-msg"
    COMMIT_MSG = "commit-msg"
    POST_COMMIT = "post-commit"
    APPLYPATCH_MSG = "applypatch-msg"
    PRE_APPLYPATCH = "pre-applypatch"
    POST_APPLYPATCH = "post-applypatch"
    PRE_REBASE = "pre-rebase"
    POST_REWRITE = "post-rewrite"
    POST_CHECKOUT = "post-checkout"
    POST_MERGE = "post-merge"
    PRE_PUSH = "pre-push"
    PRE_AUTO_GC = "pre-auto-gc"

    @classmethod
    def parse(cls, name: str) -> Optional["HookName"]:
        """Retorna o HookName correspondente ou None se desconhecido."""
        try:
            return cls(name)
        except ValueError:
            return None


class EnvironmentMode(str, Enum):
    """
    Modo de execução derivado da variável SAMOYED.

    - "0": DISABLED (pula tudo, exit 0)
    - "2": DEBUG (tracing no shell despachado)
    - qualquer outro valor ou ausente: NORMAL
    """
    DISABLED = "0"
    NORMAL = "1"
    DEBUG = "2"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "EnvironmentMode":
        """
        Calcula o modo a partir de um mapeamento de ambiente.

        Args:
            environ: os.environ ou um dict injetado (testes)

        Returns:
            EnvironmentMode correspondente
        """
        value = environ.get(ENV_VAR)
        if value == "0":
            return cls.DISABLED
        if value == "2":
            return cls.DEBUG
        return cls.NORMAL

    @property
    def is_disabled(self) -> bool:
        return self is EnvironmentMode.DISABLED

    @property
    def is_debug(self) -> bool:
        return self is EnvironmentMode.DEBUG


class ActionKind(str, Enum):
    """Tipos de ação que o resolver pode decidir."""
    RUN_COMMAND = "run_command"
    RUN_SCRIPT = "run_script"
    NOOP = "noop"


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class ResolvedAction:
    """Resultado da resolução de um hook: comando, script ou nada."""
    kind: ActionKind
    command: Optional[str] = None
    script: Optional[Path] = None

    @classmethod
    def run_command(cls, command: str) -> "ResolvedAction":
        return cls(ActionKind.RUN_COMMAND, command=command)

    @classmethod
    def run_script(cls, script: Path) -> "ResolvedAction":
        return cls(ActionKind.RUN_SCRIPT, script=script)

    @classmethod
    def noop(cls) -> "ResolvedAction":
        return cls(ActionKind.NOOP)

    @property
    def is_noop(self) -> bool:
        return self.kind == ActionKind.NOOP

    def describe(self) -> str:
        """Descrição curta para status e logs."""
        if self.kind == ActionKind.RUN_COMMAND:
            return f"comando: {self.command}"
        if self.kind == ActionKind.RUN_SCRIPT:
            return f"script: {self.script}"
        return "nada configurado"


@dataclass
class InstallResult:
    """Resultado de um `samoyed init`."""
    bypassed: bool = False
    target: Optional[Path] = None
    hooks_path: Optional[str] = None
    stubs_written: List[str] = field(default_factory=list)
    sample_created: bool = False

    @property
    def message(self) -> str:
        if self.bypassed:
            return f"{ENV_VAR}=0: ignorando samoyed init"
        return f"Hooks instalados (core.hooksPath={self.hooks_path})"


__all__ = [
    "EXIT_OK",
    "EXIT_FAILURE",
    "EXIT_COMMAND_NOT_FOUND",
    "HookName",
    "EnvironmentMode",
    "ActionKind",
    "ResolvedAction",
    "InstallResult",
]
