"""
SAMOYED - Config Loader
Carrega a tabela de comandos (hook -> comando shell) do arquivo YAML.

Formato:

    hooks:
      pre-commit: "ruff check ."
      pre-push: "pytest -q"
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml

from ..config import CONFIG_FILE_NAMES
from .models import HookName


# =============================================================================
# Exceções Customizadas
# =============================================================================

class ConfigLoadError(Exception):
    """Erro ao carregar o arquivo de configuração."""
    pass


# =============================================================================
# Config Table
# =============================================================================

class ConfigTable:
    """
    Tabela opcional de comandos por hook.

    Entradas ausentes não são erro: lookup() devolve None e o resolver
    passa para o script de fallback.
    """

    def __init__(self, commands: Optional[Dict[str, str]] = None, source: Optional[Path] = None):
        self.commands: Dict[str, str] = dict(commands or {})
        self.source = source

    def lookup(self, hook_name: str) -> Optional[str]:
        """Comando configurado para o hook, ou None."""
        return self.commands.get(hook_name)

    def __contains__(self, hook_name: str) -> bool:
        return hook_name in self.commands

    def __len__(self) -> int:
        return len(self.commands)

    def __repr__(self) -> str:
        return f"ConfigTable({len(self.commands)} hooks, source={self.source})"


# Assinatura consumida pelo resolver
CommandLookup = Callable[[str], Optional[str]]


# =============================================================================
# Loader
# =============================================================================

class ConfigLoader:
    """
    Carrega e valida a tabela de comandos.

    Responsabilidades:
    - Localizar o arquivo na raiz do repositório
    - Ler YAML com safe_load
    - Validar nomes de hooks e comandos
    """

    def find_config_file(self, repo_root: Union[str, Path]) -> Optional[Path]:
        """Primeiro arquivo de configuração existente na raiz, se houver."""
        for name in CONFIG_FILE_NAMES:
            candidate = Path(repo_root) / name
            if candidate.is_file():
                return candidate
        return None

    def load(self, repo_root: Union[str, Path]) -> ConfigTable:
        """
        Carrega a tabela do repositório.

        Args:
            repo_root: Raiz do repositório

        Returns:
            ConfigTable (vazia se não houver arquivo)

        Raises:
            ConfigLoadError: Se o arquivo existir mas for inválido
        """
        filepath = self.find_config_file(repo_root)
        if filepath is None:
            return ConfigTable()
        return self.load_from_file(filepath)

    def load_from_file(self, filepath: Union[str, Path]) -> ConfigTable:
        filepath = Path(filepath)

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Erro ao parsear YAML em {filepath.name}: {e}")
        except OSError as e:
            raise ConfigLoadError(f"Erro ao ler {filepath.name}: {e}")

        return self.load_from_dict(data, source=filepath)

    def load_from_dict(self, data: Any, source: Optional[Path] = None) -> ConfigTable:
        """
        Converte o conteúdo já parseado numa ConfigTable.

        Args:
            data: Conteúdo do YAML (None para arquivo vazio)
            source: Arquivo de origem (para mensagens)
        """
        if data is None:
            return ConfigTable(source=source)

        if not isinstance(data, dict):
            raise ConfigLoadError("YAML deve conter um objeto no nível raiz")

        hooks = data.get("hooks")
        if hooks is None:
            return ConfigTable(source=source)

        if not isinstance(hooks, dict):
            raise ConfigLoadError("Campo 'hooks' deve ser um mapeamento hook -> comando")

        commands: Dict[str, str] = {}
        for hook_name, command in hooks.items():
            if HookName.parse(str(hook_name)) is None:
                raise ConfigLoadError(f"Hook desconhecido em 'hooks': {hook_name}")

            if not isinstance(command, str):
                raise ConfigLoadError(f"Hook '{hook_name}': comando deve ser uma string")

            if not command.strip():
                raise ConfigLoadError(f"Hook '{hook_name}': comando vazio")

            commands[str(hook_name)] = command

        return ConfigTable(commands, source=source)


# =============================================================================
# Helper Functions
# =============================================================================

def load_config_table(repo_root: Union[str, Path]) -> ConfigTable:
    """Helper para carregar a tabela de comandos do repositório."""
    return ConfigLoader().load(repo_root)


__all__ = [
    "ConfigLoadError",
    "ConfigTable",
    "ConfigLoader",
    "CommandLookup",
    "load_config_table",
]
