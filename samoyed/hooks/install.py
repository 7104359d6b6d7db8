"""
SAMOYED - Git Hooks Installer
Instala os stubs de hooks e aponta core.hooksPath para eles.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import DEFAULT_TARGET, HOOKS_SUBDIR, SAMPLE_HOOK
from ..core.config_loader import load_config_table
from ..core.environment import FileSystem, ProcessRunner, SystemFileSystem, SystemProcessRunner
from ..core.models import EnvironmentMode, HookName, InstallResult
from ..core.paths import PathValidator
from ..dispatch.dispatcher import locate_install_target
from ..dispatch.resolver import CommandResolver
from ..git.repository import GitConfigurator
from ..logging import get_logger
from .scaffold import ScaffoldWriter

logger = get_logger("install")


# =============================================================================
# Hook Installer Class
# =============================================================================

class HookInstaller:
    """
    Orquestra `samoyed init`.

    Fluxo (linear, aborta no primeiro erro):
    EnvGateCheck -> RootDiscovered -> PathValidated -> Scaffolded -> HooksPathSet
    """

    def __init__(
        self,
        mode: EnvironmentMode,
        runner: Optional[ProcessRunner] = None,
        fs: Optional[FileSystem] = None,
        cwd: Optional[Path] = None,
    ):
        """
        Args:
            mode: Modo calculado uma vez a partir da variável SAMOYED
            runner: Executor de processos (git)
            fs: Filesystem usado pelo scaffolding
            cwd: Diretório da invocação (default: diretório atual)
        """
        self.mode = mode
        self.runner = runner or SystemProcessRunner()
        self.fs = fs or SystemFileSystem()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

        self.git = GitConfigurator(self.runner, cwd=self.cwd)
        self.validator = PathValidator()
        self.writer = ScaffoldWriter(self.fs)

    def init(self, target: Union[str, Path] = DEFAULT_TARGET) -> InstallResult:
        """
        Instala (ou atualiza) o scaffolding.

        Args:
            target: Diretório de instalação pedido pelo usuário

        Returns:
            InstallResult

        Raises:
            NotAGitRepositoryError, PathValidationError, FilesystemError, GitConfigError
        """
        # Checked before repository discovery so init is bypassable anywhere
        if self.mode.is_disabled:
            logger.debug("init bypassed")
            return InstallResult(bypassed=True)

        root = self.git.discover_root()
        validated = self.validator.validate(root, target, cwd=self.cwd)
        report = self.writer.write(validated)

        hooks_path = validated.git_hooks_path
        self.git.set_hooks_path(hooks_path)

        return InstallResult(
            target=validated.path,
            hooks_path=hooks_path,
            stubs_written=report.stubs,
            sample_created=report.sample_created,
        )

    def status(self) -> Dict[str, Any]:
        """
        Retorna status detalhado dos hooks.

        Raises:
            NotAGitRepositoryError: Fora de um repositório
            ConfigLoadError: Se samoyed.yaml for inválido
        """
        root = self.git.discover_root()
        hooks_path = self.git.get_hooks_path()
        target = locate_install_target(root, None, self.git)
        table = load_config_table(root)
        resolver = CommandResolver(self.fs)

        status: Dict[str, Any] = {
            "repo_path": str(root),
            "hooks_path": hooks_path,
            "target": str(target),
            "config_file": str(table.source) if table.source else None,
            "hooks": {},
        }

        for hook in HookName:
            action = resolver.resolve(hook.value, table.lookup, target)
            status["hooks"][hook.value] = {
                "installed": self.fs.is_file(target / HOOKS_SUBDIR / hook.value),
                "action": action.kind.value,
                "detail": action.describe(),
            }

        return status


# =============================================================================
# Helper Functions
# =============================================================================

def install_hooks(
    target: Union[str, Path] = DEFAULT_TARGET,
    mode: EnvironmentMode = EnvironmentMode.NORMAL,
    cwd: Optional[Path] = None,
) -> InstallResult:
    """
    Instala hooks no repositório.

    Args:
        target: Diretório de instalação
        mode: Modo de ambiente
        cwd: Diretório da invocação

    Returns:
        InstallResult
    """
    return HookInstaller(mode, cwd=cwd).init(target)


def check_hooks_status(cwd: Optional[Path] = None) -> Dict[str, Any]:
    """Verifica status dos hooks."""
    return HookInstaller(EnvironmentMode.NORMAL, cwd=cwd).status()


def print_install_summary(result: InstallResult):
    """Printa resumo da instalação (helper para CLI)."""
    from rich.console import Console

    console = Console()

    if result.bypassed:
        console.print(f"⏭️  {result.message}", style="yellow")
        return

    console.print(f"✅ {result.message}", style="green")
    if result.sample_created:
        console.print(f"📝 Hook de exemplo criado: {result.target / SAMPLE_HOOK}")


def print_status(status: Dict[str, Any]):
    """Printa status dos hooks (helper para CLI)."""
    from rich.console import Console
    from rich.table import Table

    console = Console()

    console.print(f"\n📁 Repositório: {status['repo_path']}")
    console.print(f"📂 core.hooksPath: {status['hooks_path'] or '(não configurado)'}")
    console.print(f"⚙️  Configuração: {status['config_file'] or '(nenhuma)'}\n")

    table = Table(title="Status dos Hooks")
    table.add_column("Hook", style="cyan")
    table.add_column("Stub", style="yellow")
    table.add_column("Ação", style="green")

    for hook_name, hook_status in status["hooks"].items():
        installed = "✅" if hook_status.get("installed") else "❌"
        table.add_row(hook_name, installed, hook_status["detail"])

    console.print(table)
