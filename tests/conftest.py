"""Pytest configuration and fixtures."""

import shutil
import subprocess
from pathlib import Path

import pytest

from samoyed.core.environment import FileSystem, ProcessResult, ProcessRunner


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git não disponível")
requires_sh = pytest.mark.skipif(shutil.which("sh") is None, reason="sh não disponível")


class FakeRunner(ProcessRunner):
    """
    ProcessRunner roteirizado.

    Respostas são registradas por prefixo de argv; a primeira que casar vence.
    Sem resposta registrada, devolve exit 0 sem output.
    """

    def __init__(self):
        self.calls = []
        self._responses = []
        self._missing = set()

    def respond(self, prefix, returncode=0, stdout="", stderr=""):
        self._responses.append((tuple(prefix), ProcessResult(returncode, stdout, stderr)))
        return self

    def missing(self, program):
        """Simula programa ausente do PATH."""
        self._missing.add(program)
        return self

    def run(self, args, cwd=None, capture=True):
        argv = [str(a) for a in args]
        self.calls.append({"args": argv, "cwd": cwd, "capture": capture})

        if argv[0] in self._missing:
            raise FileNotFoundError(argv[0])

        for prefix, result in self._responses:
            if tuple(argv[: len(prefix)]) == prefix:
                return result

        return ProcessResult(0)

    def commands(self, program):
        """argv de todas as chamadas a um programa."""
        return [c["args"] for c in self.calls if c["args"][0] == program]


class FakeFileSystem(FileSystem):
    """Filesystem em memória que registra cada escrita."""

    def __init__(self):
        self.files = {}
        self.dirs = set()
        self.executables = set()
        self.writes = []
        self.fail_on = None

    def exists(self, path):
        path = Path(path)
        return path in self.files or path in self.dirs

    def is_dir(self, path):
        return Path(path) in self.dirs

    def is_file(self, path):
        return Path(path) in self.files

    def create_dir(self, path):
        path = Path(path)
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def write_text(self, path, content):
        path = Path(path)
        if self.fail_on is not None and path.name == self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))
        self.files[path] = content
        self.writes.append(path)

    def read_text(self, path):
        return self.files[Path(path)]

    def set_executable(self, path):
        self.executables.add(Path(path))

    def is_executable(self, path):
        return Path(path) in self.executables


@pytest.fixture
def fake_runner():
    """ProcessRunner sem processos reais."""
    return FakeRunner()


@pytest.fixture
def fake_fs():
    """Filesystem em memória."""
    return FakeFileSystem()


@pytest.fixture
def fake_repo(tmp_path, fake_runner):
    """Diretório com .git e um runner que o reporta como raiz."""
    repo_dir = (tmp_path / "repo").resolve()
    (repo_dir / ".git").mkdir(parents=True)

    fake_runner.respond(["git", "rev-parse", "--show-toplevel"], stdout=f"{repo_dir}\n")
    fake_runner.respond(["git", "config", "--get"], returncode=1)
    return repo_dir


@pytest.fixture
def temp_git_repo(tmp_path):
    """Cria repositório git temporário."""
    if shutil.which("git") is None:
        pytest.skip("git não disponível")

    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        check=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        check=True
    )

    return repo_dir.resolve()


def git_config_get(repo_dir, key):
    """Lê uma chave do git config do repositório (None se ausente)."""
    result = subprocess.run(
        ["git", "config", "--get", key],
        cwd=repo_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        return None
    return result.stdout.strip()
