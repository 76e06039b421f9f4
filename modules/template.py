#!/usr/bin/env python3
"""Fetch the project template into an empty working directory.

Inputs: working directory via CLI.
Side effects: downloads the template tarball with curl, unpacks it with the
top-level directory stripped, and copies .env.example to .env.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

from config import ENV_FILE, ENV_TEMPLATE_FILE, TEMPLATE_ARCHIVE_URL
from modules.utils import log, run_cmd


def download_archive(url: str, dest: Path) -> None:
    run_cmd(["curl", "-fL", "-sS", "-o", str(dest), url])


def extract_archive(archive: Path, workdir: Path) -> None:
    run_cmd(
        ["tar", "xz", "--strip-components=1", "-f", str(archive), "-C", str(workdir)]
    )


def copy_env_template(workdir: Path) -> None:
    source = workdir / ENV_TEMPLATE_FILE
    if not source.exists():
        raise FileNotFoundError(f"{ENV_TEMPLATE_FILE} missing from template")
    shutil.copyfile(source, workdir / ENV_FILE)
    log(f"PASS: Copied {ENV_TEMPLATE_FILE} to {ENV_FILE}")


def init_project(workdir: Path, url: str = TEMPLATE_ARCHIVE_URL) -> bool:
    fd, tmp_name = tempfile.mkstemp(prefix="wpdev-", suffix=".tar.gz")
    os.close(fd)
    archive = Path(tmp_name)
    try:
        download_archive(url, archive)
        log(f"PASS: Downloaded {url}")
        extract_archive(archive, workdir)
        log(f"PASS: Extracted template into {workdir}")
        copy_env_template(workdir)
        return True
    except subprocess.CalledProcessError as err:
        logging.error("template fetch failed: %s exit=%s", err.cmd, err.returncode)
        return False
    except OSError as err:
        logging.error("template setup failed: %s", err)
        return False
    finally:
        archive.unlink(missing_ok=True)


if __name__ == "__main__":
    argv = sys.argv[1:]
    target = Path(argv[0]) if argv else Path.cwd()
    raise SystemExit(0 if init_project(target) else 1)
