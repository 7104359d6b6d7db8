"""
SAMOYED - Command Line Interface
Entry point principal para todos os comandos do SAMOYED.

Author: Vinícius Lisboa <contato@viniciuslisboa.com.br>
GitHub: @IamXeoth
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from samoyed.__version__ import __version__
from samoyed.config import DEFAULT_TARGET, ENV_VAR
from samoyed.core.config_loader import ConfigLoadError
from samoyed.core.models import EXIT_FAILURE, EnvironmentMode
from samoyed.core.paths import PathValidationError
from samoyed.dispatch.dispatcher import HookDispatcher, UnknownHookError
from samoyed.git.repository import GitConfigError, NotAGitRepositoryError
from samoyed.hooks.install import (
    HookInstaller,
    check_hooks_status,
    print_install_summary,
    print_status,
)
from samoyed.hooks.scaffold import FilesystemError
from samoyed.logging import configure_logging


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="samoyed",
    help="🐕 SAMOYED - Git Hooks Manager",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True, highlight=False)


def _current_mode() -> EnvironmentMode:
    """Lê SAMOYED uma vez por invocação e ajusta o nível de log."""
    mode = EnvironmentMode.from_env(os.environ)
    configure_logging(level="DEBUG" if mode.is_debug else "WARNING")
    return mode


def _fail(message: str):
    err_console.print(f"❌ {message}", style="red", markup=False, soft_wrap=True)
    raise typer.Exit(EXIT_FAILURE)


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🐕 SAMOYED version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do SAMOYED"
    )
):
    """
    🐕 SAMOYED - Git Hooks Manager

    Instala hooks via core.hooksPath e executa o comando configurado
    para cada hook disparado pelo Git.
    """
    pass


# =============================================================================
# Command: init
# =============================================================================

@app.command()
def init(
    target: str = typer.Argument(
        DEFAULT_TARGET,
        help="Diretório de instalação (dentro do repositório)"
    ),
):
    """
    🪝 Instala os hooks e configura core.hooksPath

    Exemplos:

    \b
    # Instalar em .samoyed
    samoyed init

    \b
    # Diretório customizado
    samoyed init .config/hooks

    \b
    # Pular (CI, builds)
    SAMOYED=0 samoyed init
    """
    mode = _current_mode()

    try:
        result = HookInstaller(mode).init(target)

    except NotAGitRepositoryError as e:
        _fail(str(e))

    except PathValidationError as e:
        _fail(str(e))

    except FilesystemError as e:
        _fail(f"{e} (rode 'samoyed init' novamente)")

    except GitConfigError as e:
        _fail(f"Erro ao configurar o git: {e}")

    print_install_summary(result)


# =============================================================================
# Command: hook
# =============================================================================

@app.command(
    context_settings={
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    },
)
def hook(
    hook_name: str = typer.Argument(
        ...,
        help="Nome do hook disparado pelo Git"
    ),
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Argumentos originais do hook"
    ),
    hooks_dir: Optional[Path] = typer.Option(
        None,
        "--hooks-dir",
        help="Diretório dos stubs (passado pelo wrapper)"
    ),
):
    """
    ⚡ Executa um hook (chamado pelo wrapper gerado)

    Exemplo:

    \b
    samoyed hook --hooks-dir .samoyed/_ -- pre-push origin git@host:repo.git
    """
    mode = _current_mode()

    try:
        code = HookDispatcher(mode).dispatch(hook_name, args or [], hooks_dir=hooks_dir)

    except UnknownHookError as e:
        _fail(str(e))

    except NotAGitRepositoryError as e:
        _fail(str(e))

    except ConfigLoadError as e:
        _fail(f"Erro ao carregar configuração: {e}")

    raise typer.Exit(code)


# =============================================================================
# Command: status
# =============================================================================

@app.command()
def status():
    """
    📊 Mostra status dos git hooks

    Exemplo:

    \b
    samoyed status
    """
    mode = _current_mode()

    try:
        status_info = check_hooks_status(Path.cwd())

    except NotAGitRepositoryError as e:
        _fail(str(e))

    except ConfigLoadError as e:
        _fail(f"Erro ao carregar configuração: {e}")

    print_status(status_info)

    if mode.is_disabled:
        console.print(f"⏭️  {ENV_VAR}=0: hooks estão desativados neste ambiente", style="yellow")


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
