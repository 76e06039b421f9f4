"""Utility helpers kept dependency-free.

- init_logging: configure quiet console + rotating file logging with run-id.
- status_pass/status_fail: concise console status lines (with run-id).
- report_error/report_success/report_warning: colored user-facing lines.
- run_cmd: thin wrapper over subprocess.run with check + text enabled.
- cmd_ok: run a probe command and report only whether it exited 0.
- log: debug-level logger for normal status lines (file-oriented).
- missing_dependency: first required tool not found on PATH.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, List

from config import LOG_DIR_ENV, RUN_ID_ENV


_RUN_ID = ""

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
RESET = "\033[0m"


def _gen_run_id() -> str:
    return uuid.uuid4().hex[:8]


def default_log_dir() -> Path:
    env_dir = os.environ.get(LOG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".cache" / "wpdev-bootstrap" / "log"


def init_logging(run_id: str | None = None, log_dir: Path | None = None) -> str:
    """Initialize logging with console + rotating file handlers.

    - Console: CRITICAL only; users see status lines, not log records.
    - File: DEBUG+, rich format, written to <log_dir>/wpdev-<rid>.log
    Returns the run-id used.
    """
    global _RUN_ID
    if _RUN_ID:
        return _RUN_ID

    rid = run_id or os.environ.get(RUN_ID_ENV) or _gen_run_id()
    _RUN_ID = rid

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    target_dir = Path(log_dir) if log_dir else default_log_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    logfile = target_dir / f"wpdev-{rid}.log"

    # Quiet any pre-existing console handlers
    for h in list(root.handlers):
        if isinstance(h, logging.StreamHandler) and not isinstance(
            h, logging.FileHandler
        ):
            h.setLevel(logging.CRITICAL)

    has_file = any(
        isinstance(h, RotatingFileHandler)
        and getattr(h, "baseFilename", "") == os.path.abspath(logfile)
        for h in root.handlers
    )
    if not has_file:
        fh = RotatingFileHandler(logfile, maxBytes=5 * 1024 * 1024, backupCount=3)
        fh.setLevel(logging.DEBUG)
        ffmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        fh.setFormatter(ffmt)
        root.addHandler(fh)

    if not any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    ):
        ch = logging.StreamHandler()
        ch.setLevel(logging.CRITICAL)
        ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root.addHandler(ch)

    logging.debug("Logging initialized. run_id=%s file=%s", rid, logfile)
    os.environ[RUN_ID_ENV] = rid
    return rid


def _rid() -> str:
    return _RUN_ID or os.environ.get(RUN_ID_ENV, "--------")


def status_pass(msg: str) -> None:
    print(f"PASS: {msg} [{_rid()}]")


def status_fail(msg: str) -> None:
    print(f"FAIL: {msg} [{_rid()}]", flush=True)


def report_error(msg: str) -> None:
    logging.error(msg)
    print(f"{RED}ERROR: {msg}{RESET}", file=sys.stderr, flush=True)


def report_warning(msg: str) -> None:
    logging.warning(msg)
    print(f"{YELLOW}Warning: {msg}{RESET}", flush=True)


def report_success(msg: str) -> None:
    logging.info(msg)
    print(f"{GREEN}{msg}{RESET}")


def run_cmd(args: List[str], cwd: Path | None = None) -> None:
    logging.debug("RUN: %s (cwd=%s)", " ".join(args), cwd or os.getcwd())
    subprocess.run(args, check=True, text=True, cwd=cwd)


def cmd_ok(args: List[str]) -> bool:
    proc = subprocess.run(args, text=True, capture_output=True)
    logging.debug("PROBE: %s exit=%s", " ".join(args), proc.returncode)
    return proc.returncode == 0


def log(msg: str) -> None:
    # File-oriented normal progress; stays out of console noise.
    logging.debug(msg)


def missing_dependency(tools: Iterable[str]) -> str | None:
    for tool in tools:
        if shutil.which(tool) is None:
            return tool
    return None
