"""Journalisation / progression.

FR: Centraliser les messages [INFO]/[WARN]/[ERROR]/[DBG].
EN: Centralize [INFO]/[WARN]/[ERROR]/[DBG] messages and progress helpers.
"""

import os
import sys


def info(msg: str) -> None:
    print(f"[INFO] {msg}")


def warn(msg: str) -> None:
    print(f"[WARN] {msg}")


def error(msg: str) -> None:
    print(f"[ERROR] {msg}", file=sys.stderr)


def dbg(msg: str) -> None:
    if os.environ.get("SITEGEN_DEBUG"):
        print(f"[DBG] {msg}")


def progress(prefix: str, i: int, total: int, label: str = "") -> None:
    if total <= 0:
        return
    pct = (i / total) * 100.0
    if label:
        print(f"{prefix}: {i}/{total} ({pct:5.1f}%) - {label}")
    else:
        print(f"{prefix}: {i}/{total} ({pct:5.1f}%)")
