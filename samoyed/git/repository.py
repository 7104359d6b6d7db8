"""
SAMOYED - Git Configurator
Descobre a raiz do repositório e lê/grava core.hooksPath.
"""

from pathlib import Path
from typing import List, Optional

from ..core.environment import ProcessResult, ProcessRunner, SystemProcessRunner
from ..logging import get_logger, sanitize_path

logger = get_logger("git")

HOOKS_PATH_KEY = "core.hooksPath"


# =============================================================================
# Exceções
# =============================================================================

class GitError(Exception):
    """Erro ao executar comando git."""
    pass


class NotAGitRepositoryError(GitError):
    """Diretório não é (ou não resolve para) uma working tree utilizável."""
    pass


class GitConfigError(GitError):
    """Falha ao gravar configuração do git."""

    def __init__(self, message: str, hint: Optional[str] = None):
        self.hint = hint
        full = message if not hint else f"{message} ({hint})"
        super().__init__(full)


# =============================================================================
# Git Configurator
# =============================================================================

class GitConfigurator:
    """
    Fala com o binário do git.

    Responsabilidades:
    - Descobrir a raiz da working tree (git rev-parse --show-toplevel)
    - Gravar core.hooksPath
    - Ler core.hooksPath
    """

    def __init__(self, runner: Optional[ProcessRunner] = None, cwd: Optional[Path] = None):
        """
        Args:
            runner: Executor de processos (default: subprocess real)
            cwd: Diretório de onde o git é chamado (default: diretório atual)
        """
        self.runner = runner or SystemProcessRunner()
        self.cwd = cwd or Path.cwd()

    def discover_root(self) -> Path:
        """
        Pergunta ao git a raiz da working tree.

        Returns:
            Caminho absoluto da raiz

        Raises:
            NotAGitRepositoryError: Se o git falhar ou a resposta não for
                uma working tree utilizável
        """
        try:
            result = self._run_git_command(["git", "rev-parse", "--show-toplevel"])
        except FileNotFoundError:
            raise NotAGitRepositoryError("Não é um repositório git (git não encontrado no PATH)")

        if not result.ok:
            raise NotAGitRepositoryError(
                f"Não é um repositório git: {self.cwd}\n"
                "Execute 'git init' primeiro."
            )

        toplevel = result.stdout.strip()
        if not toplevel:
            raise NotAGitRepositoryError("Não é um repositório git (sem working tree)")

        root = Path(toplevel)
        if not root.is_dir():
            raise NotAGitRepositoryError(f"Não é um repositório git: {toplevel} não é um diretório")

        self._check_dot_git(root)

        logger.debug("repository root: %s", sanitize_path(root))
        return root

    def set_hooks_path(self, hooks_path: str) -> None:
        """
        Grava core.hooksPath (idempotente).

        Args:
            hooks_path: Valor já normalizado com barras normais

        Raises:
            GitConfigError: Se o git não existir ou o comando falhar
        """
        self._check_git_available()

        try:
            result = self._run_git_command(["git", "config", HOOKS_PATH_KEY, hooks_path])
        except FileNotFoundError:
            raise GitConfigError("Git não encontrado no PATH")

        if not result.ok:
            stderr = result.stderr.strip()
            raise GitConfigError(
                f"Falha ao configurar {HOOKS_PATH_KEY}: {stderr or f'exit {result.returncode}'}",
                hint=analyze_git_config_error(stderr),
            )

        logger.debug("%s set to %s", HOOKS_PATH_KEY, hooks_path)

    def get_hooks_path(self) -> Optional[str]:
        """Valor atual de core.hooksPath, ou None se não configurado."""
        try:
            result = self._run_git_command(["git", "config", "--get", HOOKS_PATH_KEY])
        except FileNotFoundError:
            return None

        if not result.ok:
            return None

        value = result.stdout.strip()
        return value or None

    # =========================================================================
    # Helpers Privados
    # =========================================================================

    def _check_git_available(self) -> None:
        """Valida que o git existe antes de tentar gravar configuração."""
        try:
            result = self._run_git_command(["git", "--version"])
        except FileNotFoundError:
            raise GitConfigError("Git não encontrado no PATH", hint=git_install_hint())

        if not result.ok:
            raise GitConfigError("Git não respondeu a 'git --version'", hint=git_install_hint())

    def _check_dot_git(self, root: Path) -> None:
        """A raiz precisa ter .git (diretório, ou arquivo 'gitdir:' válido)."""
        dot_git = root / ".git"

        if dot_git.is_dir():
            return

        if dot_git.is_file():
            try:
                content = dot_git.read_text(encoding="utf-8").strip()
            except OSError as e:
                raise NotAGitRepositoryError(f"Não é um repositório git (.git ilegível: {e})")

            if content.lower().startswith("gitdir:"):
                gitdir = Path(content.split(":", 1)[1].strip())
                if not gitdir.is_absolute():
                    gitdir = root / gitdir
                if gitdir.is_dir():
                    return

            raise NotAGitRepositoryError(
                f"Não é um repositório git: {dot_git} não aponta para um gitdir válido"
            )

        raise NotAGitRepositoryError(f"Não é um repositório git: {root} não contém .git")

    def _run_git_command(self, cmd: List[str]) -> ProcessResult:
        """
        Executa comando git capturando output.

        Raises:
            FileNotFoundError: Se o git não estiver no PATH
        """
        return self.runner.run(cmd, cwd=self.cwd, capture=True)


# =============================================================================
# Helper Functions
# =============================================================================

def analyze_git_config_error(stderr: str) -> Optional[str]:
    """Sugestão específica a partir do stderr do git config."""
    lower = stderr.lower()

    if "could not lock config file" in lower:
        return "outro processo git pode estar rodando; verifique .git/config.lock"
    if "not a git repository" in lower:
        return "execute dentro de um repositório git"
    if "bad config" in lower:
        return "arquivo .git/config pode estar corrompido"
    if "invalid key" in lower:
        return "formato de chave inválido"
    if "permission denied" in lower:
        return "sem permissão para gravar .git/config"
    return None


def git_install_hint() -> str:
    """Dica de instalação do git por plataforma."""
    import platform

    system = platform.system()
    if system == "Linux":
        return "instale com o gerenciador de pacotes, ex: apt install git"
    if system == "Darwin":
        return "instale com: xcode-select --install ou brew install git"
    if system == "Windows":
        return "baixe em https://git-scm.com/download/win"
    return "instale o git e garanta que está no PATH"


def discover_root(cwd: Optional[Path] = None) -> Path:
    """Helper function para descobrir a raiz do repositório."""
    return GitConfigurator(cwd=cwd).discover_root()


__all__ = [
    "GitError",
    "NotAGitRepositoryError",
    "GitConfigError",
    "GitConfigurator",
    "HOOKS_PATH_KEY",
    "analyze_git_config_error",
    "git_install_hint",
    "discover_root",
]
