"""Acesso ao Git: raiz do repositório e core.hooksPath."""

from .repository import (
    GitConfigError,
    GitConfigurator,
    GitError,
    NotAGitRepositoryError,
    discover_root,
)

__all__ = [
    "GitConfigError",
    "GitConfigurator",
    "GitError",
    "NotAGitRepositoryError",
    "discover_root",
]
