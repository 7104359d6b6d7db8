"""
SAMOYED - Hook Templates
Conteúdo fixo dos arquivos gerados por `samoyed init`.
"""

from ..config import ENV_VAR, INIT_SCRIPT_RELATIVE, WRAPPER_NAME


# =============================================================================
# Hook Templates
# =============================================================================

GITIGNORE_TEMPLATE = "*\n"

# Same body for every hook: the stub passes its own name to the wrapper
HOOK_STUB_TEMPLATE = f"""#!/usr/bin/env sh
# SAMOYED hook stub
# Auto-generated - DO NOT EDIT MANUALLY

exec sh "$(dirname "$0")/{WRAPPER_NAME}" "$(basename "$0")" "$@"
"""

WRAPPER_TEMPLATE = f"""#!/usr/bin/env sh
# SAMOYED wrapper
# Auto-generated - DO NOT EDIT MANUALLY
#
# Usage: {WRAPPER_NAME} <hook-name> [args...]

[ "${{{ENV_VAR}-}}" = "0" ] && exit 0

samoyed_hooks_dir="$(cd "$(dirname "$0")" && pwd)"
samoyed_hook_name="$1"
shift

# Shared environment setup for every hook
samoyed_init="${{XDG_CONFIG_HOME:-$HOME/.config}}/{INIT_SCRIPT_RELATIVE}"
[ -f "$samoyed_init" ] && . "$samoyed_init"

# init.sh may have disabled hooks
[ "${{{ENV_VAR}-}}" = "0" ] && exit 0
[ "${{{ENV_VAR}-}}" = "2" ] && set -x

if command -v samoyed > /dev/null 2>&1; then
    exec samoyed hook --hooks-dir "$samoyed_hooks_dir" -- "$samoyed_hook_name" "$@"
fi

for samoyed_python in python3 python; do
    if command -v "$samoyed_python" > /dev/null 2>&1; then
        exec "$samoyed_python" -m samoyed hook --hooks-dir "$samoyed_hooks_dir" -- "$samoyed_hook_name" "$@"
    fi
done

echo "samoyed - comando 'samoyed' não encontrado no PATH=$PATH" >&2
exit 127
"""

SAMPLE_HOOK_TEMPLATE = f"""#!/usr/bin/env sh
# SAMOYED sample pre-commit hook
#
# This file is yours: `samoyed init` never overwrites it.
# It runs when samoyed.yaml has no `pre-commit` entry.
# Hook arguments arrive as "$@"; a non-zero exit blocks the commit.
#
# Examples (uncomment and customize):
# ruff check .
# pytest -q
# npm test
#
# Skip all hooks for one command with: {ENV_VAR}=0 git commit ...
# Trace hook execution with:           {ENV_VAR}=2 git commit ...
"""


__all__ = [
    "GITIGNORE_TEMPLATE",
    "HOOK_STUB_TEMPLATE",
    "WRAPPER_TEMPLATE",
    "SAMPLE_HOOK_TEMPLATE",
]
