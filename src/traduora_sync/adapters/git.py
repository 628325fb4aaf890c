"""Read translation files as they were at a git revision."""

from __future__ import annotations

import shutil
import subprocess
from logging import getLogger
from pathlib import Path

from traduora_sync.domain.errors import RevisionError

log = getLogger(__name__)


def show_file_at_revision(revision: str, path: Path) -> bytes:
    """Return the bytes of ``path`` at ``revision`` (``git show <revision>:<path>``).

    git runs from the file's directory and the path is given relative to it, so
    the working directory of the caller does not matter.
    """

    git = shutil.which("git")
    if git is None:
        raise RevisionError("git executable not found on PATH")

    resolved = Path(path).expanduser().resolve()
    object_name = f"{revision}:./{resolved.name}"
    log.debug("git show %s in %s", object_name, resolved.parent)
    try:
        completed = subprocess.run(  # noqa: S603
            [git, "show", object_name],
            cwd=resolved.parent,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise RevisionError(f"Failed to run git in {resolved.parent}: {exc}") from exc

    if completed.returncode != 0:
        stderr = completed.stderr.decode("utf-8", errors="replace").strip()
        raise RevisionError(f"Cannot read {path} at revision {revision!r}: {stderr}")
    return completed.stdout
