"""
SAMOYED - Command Resolver
Decide o que rodar para um hook: comando configurado, script de fallback ou nada.
"""

from pathlib import Path
from typing import Optional

from ..core.config_loader import CommandLookup
from ..core.environment import FileSystem, SystemFileSystem
from ..core.models import ResolvedAction
from ..logging import get_logger, sanitize_path

logger = get_logger("resolver")


def fallback_script_path(install_target: Path, hook_name: str) -> Path:
    """Script do usuário para o hook: <target>/<hook-name>."""
    return Path(install_target) / hook_name


class CommandResolver:
    """
    Resolução em duas camadas, ordem fixa:

    1. Entrada da tabela de comandos para o hook
    2. Script de fallback existente e executável
    3. NoOp (não é erro: o dispatcher sai com 0)
    """

    def __init__(self, fs: Optional[FileSystem] = None):
        self.fs = fs or SystemFileSystem()

    def resolve(
        self,
        hook_name: str,
        lookup: CommandLookup,
        install_target: Path,
    ) -> ResolvedAction:
        """
        Args:
            hook_name: Nome do hook disparado
            lookup: Função hook -> comando (ou None)
            install_target: Diretório de instalação

        Returns:
            ResolvedAction
        """
        command = lookup(hook_name)
        if command is not None:
            logger.debug("%s: using configured command", hook_name)
            return ResolvedAction.run_command(command)

        script = fallback_script_path(install_target, hook_name)

        if not self.fs.is_file(script):
            logger.debug("%s: no command, no script at %s", hook_name, sanitize_path(script))
            return ResolvedAction.noop()

        # A script without the executable bit is skipped, not an error
        if not self.fs.is_executable(script):
            logger.debug("%s: script not executable, skipping: %s", hook_name, sanitize_path(script))
            return ResolvedAction.noop()

        logger.debug("%s: using script %s", hook_name, sanitize_path(script))
        return ResolvedAction.run_script(script)


__all__ = [
    "CommandResolver",
    "fallback_script_path",
]
