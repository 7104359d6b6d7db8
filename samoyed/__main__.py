"""Permite `python -m samoyed` (usado pelo wrapper quando o script não está no PATH)."""

from samoyed.cli import main

if __name__ == "__main__":
    main()
