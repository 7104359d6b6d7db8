"""
SAMOYED - Hook Dispatcher
Executa o hook disparado pelo Git e propaga o exit code.
"""

import os
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from rich.console import Console

from ..config import DEFAULT_TARGET, ENV_VAR
from ..core.config_loader import load_config_table
from ..core.environment import FileSystem, ProcessRunner, SystemFileSystem, SystemProcessRunner
from ..core.models import (
    EXIT_COMMAND_NOT_FOUND,
    EXIT_OK,
    ActionKind,
    EnvironmentMode,
    HookName,
    ResolvedAction,
)
from ..git.repository import GitConfigurator
from ..logging import get_logger, sanitize_path
from .resolver import CommandResolver

logger = get_logger("dispatch")


# =============================================================================
# Exceções
# =============================================================================

class UnknownHookError(Exception):
    """Nome de hook fora do conjunto suportado."""

    def __init__(self, hook_name: str):
        self.hook_name = hook_name
        super().__init__(f"Hook desconhecido: {hook_name}")


# =============================================================================
# Helpers
# =============================================================================

def locate_install_target(
    repo_root: Path,
    hooks_dir: Optional[Path],
    git: GitConfigurator,
) -> Path:
    """
    Descobre o diretório de instalação a partir do diretório dos stubs.

    Ordem: --hooks-dir do wrapper, depois core.hooksPath, depois o default.
    O diretório de instalação é sempre o pai de <target>/_.
    """
    if hooks_dir is not None:
        candidate = Path(hooks_dir)
    else:
        configured = git.get_hooks_path()
        if not configured:
            return Path(repo_root) / DEFAULT_TARGET
        candidate = Path(configured)

    if not candidate.is_absolute():
        candidate = Path(repo_root) / candidate

    return candidate.parent


def build_shell_argv(
    action: ResolvedAction,
    hook_name: str,
    args: Sequence[str],
    debug: bool = False,
) -> List[str]:
    """
    Monta a invocação do shell para a ação.

    - Comando: sh -e [-x] -c <comando> <hook> <args...>  (args viram $1, $2...)
    - Script:  sh -e [-x] <script> <args...>
    """
    argv = ["sh", "-e"]
    if debug:
        argv.append("-x")

    if action.kind == ActionKind.RUN_COMMAND:
        argv += ["-c", action.command, hook_name]
    elif action.kind == ActionKind.RUN_SCRIPT:
        argv.append(str(action.script))
    else:
        raise ValueError("NoOp não gera invocação de shell")

    argv.extend(args)
    return argv


def loggable_argv(argv: Sequence[str], action: ResolvedAction) -> List[str]:
    """argv para logs de debug, com o caminho do script sanitizado."""
    if action.script is None:
        return list(argv)
    script = str(action.script)
    return [sanitize_path(arg) if arg == script else arg for arg in argv]


def normalize_exit_code(returncode: int) -> int:
    """Processo morto por sinal (código negativo) vira 128 + sinal."""
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


# =============================================================================
# Hook Dispatcher
# =============================================================================

class HookDispatcher:
    """
    Dispatcher de hooks.

    Fluxo:
    Fired -> EnvGateCheck -> Resolve -> (RunCommand | RunScript | NoOp) -> ExitPropagated

    stdout/stderr do processo filho são herdados, nunca capturados.
    """

    def __init__(
        self,
        mode: EnvironmentMode,
        runner: Optional[ProcessRunner] = None,
        fs: Optional[FileSystem] = None,
        cwd: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        console: Optional[Console] = None,
    ):
        """
        Args:
            mode: Modo calculado uma vez a partir da variável SAMOYED
            runner: Executor de processos (git e shell)
            fs: Filesystem usado na checagem do script de fallback
            cwd: Diretório de onde o git chamou o hook
            environ: Ambiente (só para a dica de PATH)
            console: Console rich para diagnósticos (stderr)
        """
        self.mode = mode
        self.runner = runner or SystemProcessRunner()
        self.fs = fs or SystemFileSystem()
        self.cwd = Path(cwd) if cwd is not None else None
        self.environ = environ if environ is not None else os.environ
        self.console = console or Console(stderr=True, highlight=False)

    def dispatch(
        self,
        hook_name: str,
        args: Sequence[str] = (),
        hooks_dir: Optional[Path] = None,
    ) -> int:
        """
        Dispara um hook.

        Args:
            hook_name: Nome do hook (basename do stub)
            args: Argumentos originais passados pelo Git
            hooks_dir: Diretório dos stubs (<target>/_), vindo do wrapper

        Returns:
            Exit code a propagar para o Git (0 para NoOp)

        Raises:
            UnknownHookError: Nome fora do conjunto de hooks
            NotAGitRepositoryError: Fora de um repositório
            ConfigLoadError: samoyed.yaml inválido
        """
        # Disabled: no filesystem access, no process spawned
        if self.mode.is_disabled:
            return EXIT_OK

        name = Path(hook_name).name
        hook = HookName.parse(name)
        if hook is None:
            raise UnknownHookError(name)

        git = GitConfigurator(self.runner, cwd=self.cwd)
        root = git.discover_root()
        target = locate_install_target(root, hooks_dir, git)

        table = load_config_table(root)
        action = CommandResolver(self.fs).resolve(hook.value, table.lookup, target)

        if action.is_noop:
            return EXIT_OK

        return self._execute(hook.value, action, list(args), root)

    def _execute(
        self,
        hook_name: str,
        action: ResolvedAction,
        args: List[str],
        cwd: Path,
    ) -> int:
        """Executa a ação e devolve o exit code do filho."""
        argv = build_shell_argv(action, hook_name, args, debug=self.mode.is_debug)
        logger.debug("running: %s (cwd=%s)", loggable_argv(argv, action), sanitize_path(cwd))

        try:
            result = self.runner.run(argv, cwd=cwd, capture=False)
            exit_code = normalize_exit_code(result.returncode)
        except FileNotFoundError:
            self.console.print("samoyed - shell 'sh' não encontrado", style="red", markup=False, soft_wrap=True)
            exit_code = EXIT_COMMAND_NOT_FOUND

        logger.debug("%s exited with %d", hook_name, exit_code)

        if exit_code != EXIT_OK:
            self._report_failure(hook_name, exit_code)

        return exit_code

    def _report_failure(self, hook_name: str, exit_code: int):
        """Diagnóstico curto em stderr; 127 ganha a dica de PATH."""
        self.console.print(
            f"samoyed - {hook_name} falhou (código {exit_code})",
            style="red",
            markup=False,
            soft_wrap=True,
        )

        if exit_code == EXIT_COMMAND_NOT_FOUND:
            path = self.environ.get("PATH", "")
            self.console.print(
                f"samoyed - comando não encontrado no PATH={path}",
                style="red",
                markup=False,
                soft_wrap=True,
            )
            if not self.mode.is_debug:
                self.console.print(
                    f"samoyed - rode com {ENV_VAR}=2 para mais detalhes",
                    markup=False,
                    soft_wrap=True,
                )


__all__ = [
    "UnknownHookError",
    "HookDispatcher",
    "locate_install_target",
    "build_shell_argv",
    "normalize_exit_code",
    "loggable_argv",
]
