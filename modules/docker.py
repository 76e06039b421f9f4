#!/usr/bin/env python3
"""Drive the docker compose lifecycle for a bootstrapped environment.

SRP: This module only runs container commands in the working directory.
Template files and .env handling live in modules.template and modules.env.
"""
from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from config import APP_SERVICE, APP_SETUP_SCRIPT, DOCKER_NETWORK
from modules.utils import cmd_ok, log, run_cmd, status_fail, status_pass

COMPOSE = ["docker", "compose"]


def compose_build(workdir: Path) -> None:
    run_cmd(COMPOSE + ["build"], cwd=workdir)


def ensure_network(name: str = DOCKER_NETWORK) -> None:
    # Any inspect failure counts as "absent".
    if cmd_ok(["docker", "network", "inspect", name]):
        log(f"SKIP: network {name} already exists")
        return
    run_cmd(["docker", "network", "create", "--driver", "bridge", name])
    log(f"PASS: Created network {name}")


def compose_up(workdir: Path) -> None:
    run_cmd(COMPOSE + ["up", "-d"], cwd=workdir)


def run_app_setup(workdir: Path) -> None:
    run_cmd(COMPOSE + ["exec", APP_SERVICE, APP_SETUP_SCRIPT], cwd=workdir)


def provision(workdir: Path) -> bool:
    steps = (
        ("compose build", lambda: compose_build(workdir)),
        ("shared network", ensure_network),
        ("compose up", lambda: compose_up(workdir)),
        ("app setup", lambda: run_app_setup(workdir)),
    )
    for label, step in steps:
        try:
            step()
        except subprocess.CalledProcessError as err:
            logging.error("%s failed: exit=%s", label, err.returncode)
            status_fail(label)
            return False
        status_pass(label)
    return True


if __name__ == "__main__":
    argv = sys.argv[1:]
    target = Path(argv[0]) if argv else Path.cwd()
    raise SystemExit(0 if provision(target) else 1)
