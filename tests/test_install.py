"""Tests for `samoyed init` orchestration."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from samoyed.core.models import EnvironmentMode, HookName
from samoyed.core.paths import OutsideRepository, TraversalRejected
from samoyed.git.repository import GitConfigError, NotAGitRepositoryError
from samoyed.hooks.install import HookInstaller, install_hooks
from samoyed.hooks.scaffold import FilesystemError

from conftest import git_config_get, requires_git, requires_sh


def test_init_writes_scaffold_and_sets_hooks_path(fake_repo, fake_runner, fake_fs):
    result = HookInstaller(EnvironmentMode.NORMAL, fake_runner, fake_fs, cwd=fake_repo).init()

    assert not result.bypassed
    assert result.target == fake_repo / ".samoyed"
    assert result.hooks_path == ".samoyed/_"
    assert result.sample_created is True
    assert len(result.stubs_written) == 14
    assert ["git", "config", "core.hooksPath", ".samoyed/_"] in fake_runner.commands("git")
    assert "core.hooksPath=.samoyed/_" in result.message


def test_hooks_path_written_after_scaffold(fake_repo, fake_runner, fake_fs):
    """Se o scaffolding falha, core.hooksPath não é tocado."""
    fake_fs.fail_on = "samoyed"

    with pytest.raises(FilesystemError):
        HookInstaller(EnvironmentMode.NORMAL, fake_runner, fake_fs, cwd=fake_repo).init()

    assert not any(cmd[:3] == ["git", "config", "core.hooksPath"] for cmd in fake_runner.commands("git"))


def test_traversal_performs_no_writes(fake_repo, fake_runner, fake_fs):
    with pytest.raises(TraversalRejected):
        HookInstaller(EnvironmentMode.NORMAL, fake_runner, fake_fs, cwd=fake_repo).init("../outside")

    assert fake_fs.writes == []
    assert fake_fs.dirs == set()
    assert ["git", "--version"] not in fake_runner.commands("git")


def test_outside_repository_performs_no_writes(fake_repo, fake_runner, fake_fs, tmp_path):
    with pytest.raises(OutsideRepository):
        HookInstaller(EnvironmentMode.NORMAL, fake_runner, fake_fs, cwd=fake_repo).init(
            str(tmp_path / "elsewhere")
        )

    assert fake_fs.writes == []


def test_disabled_bypasses_everything(tmp_path, fake_runner, fake_fs):
    """SAMOYED=0: nem descoberta de repositório, funciona fora de um repo."""
    result = HookInstaller(EnvironmentMode.DISABLED, fake_runner, fake_fs, cwd=tmp_path).init("../x")

    assert result.bypassed
    assert "SAMOYED=0" in result.message
    assert fake_runner.calls == []
    assert fake_fs.writes == []


def test_not_a_repository(tmp_path, fake_runner, fake_fs):
    fake_runner.respond(["git", "rev-parse"], returncode=128)

    with pytest.raises(NotAGitRepositoryError):
        HookInstaller(EnvironmentMode.NORMAL, fake_runner, fake_fs, cwd=tmp_path).init()

    assert fake_fs.writes == []


def test_git_config_failure_surfaces(fake_repo, fake_runner, fake_fs):
    fake_runner.respond(
        ["git", "config", "core.hooksPath"], returncode=255, stderr="error: could not lock config file"
    )

    with pytest.raises(GitConfigError):
        HookInstaller(EnvironmentMode.NORMAL, fake_runner, fake_fs, cwd=fake_repo).init()


def test_debug_mode_installs_normally(fake_repo, fake_runner, fake_fs):
    result = HookInstaller(EnvironmentMode.DEBUG, fake_runner, fake_fs, cwd=fake_repo).init()

    assert result.hooks_path == ".samoyed/_"


def test_status_reports_actions(fake_repo, fake_runner, fake_fs):
    (fake_repo / "samoyed.yaml").write_text("hooks:\n  pre-push: pytest -q\n")
    installer = HookInstaller(EnvironmentMode.NORMAL, fake_runner, fake_fs, cwd=fake_repo)
    installer.init()

    status = installer.status()

    assert status["repo_path"] == str(fake_repo)
    assert len(status["hooks"]) == 14
    assert status["hooks"]["pre-push"]["action"] == "run_command"
    assert status["hooks"]["pre-commit"]["action"] == "run_script"
    assert status["hooks"]["post-merge"]["action"] == "noop"
    assert all(info["installed"] for info in status["hooks"].values())


# =============================================================================
# Real git + disk
# =============================================================================

@requires_git
def test_init_real_repository(temp_git_repo):
    result = install_hooks(cwd=temp_git_repo)

    hooks_dir = temp_git_repo / ".samoyed" / "_"
    assert result.hooks_path == ".samoyed/_"
    assert git_config_get(temp_git_repo, "core.hooksPath") == ".samoyed/_"
    assert (hooks_dir / ".gitignore").read_text() == "*\n"
    for hook in HookName:
        assert (hooks_dir / hook.value).is_file()


@requires_git
def test_init_is_idempotent(temp_git_repo):
    install_hooks(cwd=temp_git_repo)
    sample = temp_git_repo / ".samoyed" / "pre-commit"
    sample.write_text("#!/usr/bin/env sh\necho custom\n")
    hooks_dir = temp_git_repo / ".samoyed" / "_"
    before = {p.name: p.read_bytes() for p in hooks_dir.iterdir()}

    result = install_hooks(cwd=temp_git_repo)

    assert result.sample_created is False
    assert sample.read_text() == "#!/usr/bin/env sh\necho custom\n"
    assert {p.name: p.read_bytes() for p in hooks_dir.iterdir()} == before
    assert git_config_get(temp_git_repo, "core.hooksPath") == ".samoyed/_"


@requires_git
def test_init_from_subdirectory(temp_git_repo):
    sub = temp_git_repo / "packages" / "app"
    sub.mkdir(parents=True)

    result = install_hooks(cwd=sub)

    assert result.hooks_path == "packages/app/.samoyed/_"
    assert (sub / ".samoyed" / "_" / "samoyed").is_file()


@requires_git
def test_init_custom_target(temp_git_repo):
    result = install_hooks(".config/hooks", cwd=temp_git_repo)

    assert result.hooks_path == ".config/hooks/_"
    assert git_config_get(temp_git_repo, "core.hooksPath") == ".config/hooks/_"


# =============================================================================
# Git -> stub -> wrapper -> samoyed hook
# =============================================================================

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def hook_env(tmp_path):
    """Ambiente para o git achar `samoyed` no PATH sem instalação."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    shim = bin_dir / "samoyed"
    shim.write_text(f'#!/bin/sh\nexec "{sys.executable}" -m samoyed "$@"\n')
    shim.chmod(0o755)

    env = dict(os.environ)
    env.pop("SAMOYED", None)
    env["PATH"] = f"{bin_dir}{os.pathsep}{env.get('PATH', '')}"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    env["XDG_CONFIG_HOME"] = str(tmp_path / "xdg")
    return env


def git_commit(repo_dir, env, message):
    (repo_dir / "file.txt").write_text(message)
    subprocess.run(["git", "add", "file.txt"], cwd=repo_dir, env=env, check=True)
    return subprocess.run(
        ["git", "commit", "-m", message],
        cwd=repo_dir,
        env=env,
        capture_output=True,
        text=True,
    )


def commit_count(repo_dir):
    result = subprocess.run(
        ["git", "rev-list", "--count", "--all"],
        cwd=repo_dir,
        capture_output=True,
        text=True,
    )
    return int(result.stdout.strip() or 0)


@requires_git
@requires_sh
@pytest.mark.skipif(os.name == "nt", reason="stubs POSIX")
def test_failing_hook_blocks_commit(temp_git_repo, hook_env):
    install_hooks(cwd=temp_git_repo)
    (temp_git_repo / "samoyed.yaml").write_text("hooks:\n  pre-commit: 'exit 3'\n")

    result = git_commit(temp_git_repo, hook_env, "first")

    assert result.returncode != 0
    assert "pre-commit falhou (código 3)" in result.stderr
    assert commit_count(temp_git_repo) == 0


@requires_git
@requires_sh
@pytest.mark.skipif(os.name == "nt", reason="stubs POSIX")
def test_disabled_hooks_let_commit_through(temp_git_repo, hook_env):
    install_hooks(cwd=temp_git_repo)
    (temp_git_repo / "samoyed.yaml").write_text("hooks:\n  pre-commit: 'exit 3'\n")
    hook_env["SAMOYED"] = "0"

    result = git_commit(temp_git_repo, hook_env, "first")

    assert result.returncode == 0, result.stderr
    assert commit_count(temp_git_repo) == 1


@requires_git
@requires_sh
@pytest.mark.skipif(os.name == "nt", reason="stubs POSIX")
def test_debug_mode_traces_hook_command(temp_git_repo, hook_env):
    install_hooks(cwd=temp_git_repo)
    (temp_git_repo / "samoyed.yaml").write_text("hooks:\n  pre-commit: 'echo hi'\n")
    hook_env["SAMOYED"] = "2"

    result = git_commit(temp_git_repo, hook_env, "first")

    assert result.returncode == 0, result.stderr
    assert "+ echo hi" in result.stderr
    assert commit_count(temp_git_repo) == 1
