"""Working-directory state probing.

The run's position in its lifecycle is inferred from the filesystem on
every invocation; only file presence is checked, never contents.
"""

from __future__ import annotations

import enum
from pathlib import Path

from config import BOOTSTRAP_SCRIPT, VERSION_MARKER_FILE
from modules.utils import log


class WorkdirState(enum.Enum):
    EMPTY = "empty"
    PROVISIONED = "provisioned"
    UNKNOWN = "unknown"


IGNORED_ENTRIES = frozenset({BOOTSTRAP_SCRIPT})


def is_empty(workdir: Path) -> bool:
    for entry in workdir.iterdir():
        if entry.name in IGNORED_ENTRIES:
            continue
        return False
    return True


def detect_state(workdir: Path) -> WorkdirState:
    workdir.mkdir(parents=True, exist_ok=True)
    if (workdir / VERSION_MARKER_FILE).exists():
        log(f"STATE: marker {VERSION_MARKER_FILE} present in {workdir}")
        return WorkdirState.PROVISIONED
    if is_empty(workdir):
        log(f"STATE: {workdir} is empty")
        return WorkdirState.EMPTY
    log(f"STATE: {workdir} is not empty and has no {VERSION_MARKER_FILE}")
    return WorkdirState.UNKNOWN
