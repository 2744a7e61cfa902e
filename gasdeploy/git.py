"""
git.py

Responsibility: run the handful of git commands the deploy flow needs.

`diff()` and `has_commits()` are read-only probes and never raise: a repo
without commits has no HEAD, so both fail there and that failure is the
signal. `add_all()`, `commit()` and `push()` raise GitCommandError.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class GitCommandError(RuntimeError):
    pass


def _run(cmd: list[str], *, cwd: Path) -> str:
    """
    Run a subprocess command, raising a GitCommandError on failure.
    """
    logger.debug("Run: %s", " ".join(cmd))
    try:
        r = subprocess.run(cmd, cwd=str(cwd), check=True, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
    except subprocess.CalledProcessError as e:
        raise GitCommandError(f"Command failed: {' '.join(cmd)}\n\n{e.stdout}") from e
    except FileNotFoundError as e:
        raise GitCommandError(f"Command not found: {cmd[0]}") from e
    return r.stdout


class GitRepo:
    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def diff(self) -> str:
        """
        Uncommitted changes relative to HEAD; "" when git cannot produce them.
        """
        try:
            return _run(["git", "diff", "HEAD"], cwd=self.root)
        except GitCommandError as e:
            logger.warning("Error retrieving git diff: %s", e)
            return ""

    def has_commits(self) -> bool:
        try:
            _run(["git", "rev-parse", "HEAD"], cwd=self.root)
        except GitCommandError:
            return False
        return True

    def add_all(self) -> None:
        _run(["git", "add", "."], cwd=self.root)

    def commit(self, message: str) -> None:
        out = _run(["git", "commit", "-m", message], cwd=self.root)
        logger.debug(out)

    def push(self) -> None:
        out = _run(["git", "push"], cwd=self.root)
        logger.debug(out)
