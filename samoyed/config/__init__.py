"""Constantes de configuração do SAMOYED."""

DEFAULT_TARGET = ".samoyed"
HOOKS_SUBDIR = "_"
WRAPPER_NAME = "samoyed"
SAMPLE_HOOK = "pre-commit"

ENV_VAR = "SAMOYED"

# Procurados na raiz do repositório, nessa ordem
CONFIG_FILE_NAMES = ("samoyed.yaml", "samoyed.yml")

# Relativo a $XDG_CONFIG_HOME (ou ~/.config)
INIT_SCRIPT_RELATIVE = "samoyed/init.sh"

__all__ = [
    "DEFAULT_TARGET",
    "HOOKS_SUBDIR",
    "WRAPPER_NAME",
    "SAMPLE_HOOK",
    "ENV_VAR",
    "CONFIG_FILE_NAMES",
    "INIT_SCRIPT_RELATIVE",
]
