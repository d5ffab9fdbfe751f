"""Erreurs de build et exécution de commandes externes.

FR: Toute erreur est fatale; seul generate_site.main() l'affiche et quitte.
EN: Every error is fatal; only generate_site.main() reports it and exits.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from sitegen.logging_utils import dbg


class BuildError(RuntimeError):
    pass


class CommandError(BuildError):
    def __init__(self, argv: Sequence[str], returncode: int | None, stderr: str = ""):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        status = "not started" if returncode is None else f"exit status {returncode}"
        msg = f"{' '.join(self.argv)}: {status}"
        if stderr.strip():
            msg += f": {stderr.strip()}"
        super().__init__(msg)


def run_command(argv: Sequence[str], cwd: Path | None = None) -> bytes:
    """Run argv to completion and return its stdout.

    Blocks until the process exits. stderr is captured and folded into the
    CommandError raised on a nonzero exit.
    """
    dbg(f"exec: {' '.join(argv)}")
    try:
        proc = subprocess.run(list(argv), cwd=cwd, capture_output=True, check=False)
    except OSError as e:
        raise CommandError(argv, None, str(e)) from e
    if proc.returncode != 0:
        raise CommandError(argv, proc.returncode, proc.stderr.decode("utf-8", errors="replace"))
    return proc.stdout
