#!/usr/bin/env python3
"""CLI to bootstrap a local docker-based WordPress environment.

Inputs: working directory and log directory via CLI flags.
Side effects: downloads the project template into an empty directory,
writes .env and .env.secrets, waits for a valid .env, then builds and
starts the containers and optionally trusts the nginx certificate.
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable

from config import REQUIRED_DEPENDENCIES
from modules.certs import install_local_trust
from modules.docker import provision
from modules.env import Config, prompt_until_valid, validate_env
from modules.salts import ensure_secrets
from modules.template import init_project
from modules.utils import (
    init_logging,
    log,
    missing_dependency,
    report_error,
    report_success,
    status_pass,
)
from modules.workdir import WorkdirState, detect_state


# ─── CLI ──────────────────────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wpdev-bootstrap",
        description="Provision a local WordPress development environment.",
    )
    parser.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="working directory (default: current directory)",
    )
    parser.add_argument(
        "--log-dir", type=Path, default=None, help="directory for run logs"
    )
    return parser


# ─── Orchestration Steps ───────────────────────────────────────────────
def step_dependencies() -> bool:
    tool = missing_dependency(REQUIRED_DEPENDENCIES)
    if tool:
        report_error(f"{tool} is not installed.")
        return False
    status_pass("dependencies")
    return True


def step_fresh(workdir: Path, read_line: Callable[[str], str]) -> Config | None:
    if not init_project(workdir):
        report_error("could not download the project template")
        return None
    status_pass("template")
    ensure_secrets(workdir)
    return prompt_until_valid(workdir, read_line)


def step_existing(workdir: Path, read_line: Callable[[str], str]) -> Config:
    ensure_secrets(workdir)
    config, _ = validate_env(workdir)
    if config is not None:
        return config
    return prompt_until_valid(workdir, read_line)


def bootstrap(workdir: Path, read_line: Callable[[str], str] = input) -> bool:
    if not step_dependencies():
        return False

    try:
        state = detect_state(workdir)
    except OSError as err:
        report_error(f"cannot use working directory {workdir}: {err}")
        return False
    if state is WorkdirState.UNKNOWN:
        report_error(
            f"working directory {workdir} is not empty and holds no known environment."
        )
        return False

    print("Starting auto setup...")
    if state is WorkdirState.EMPTY:
        config = step_fresh(workdir, read_line)
    else:
        config = step_existing(workdir, read_line)
    if config is None:
        return False
    status_pass("configuration")

    if not provision(workdir):
        report_error("container provisioning failed; see log")
        return False

    install_local_trust(workdir, config)
    report_success("Auto setup is now Done!")
    return True


def main(argv: list[str], read_line: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)
    init_logging(None, args.log_dir)
    workdir = (args.dir or Path.cwd()).absolute()
    log(f"bootstrap start: workdir={workdir} pid={os.getpid()}")
    try:
        ok = bootstrap(workdir, read_line)
    except (EOFError, KeyboardInterrupt):
        print()
        report_error("setup aborted")
        return 1
    return 0 if ok else 1


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
