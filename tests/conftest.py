from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

import wpbootstrap
from config import LOG_DIR_ENV, RUN_ID_ENV
from modules import certs, docker, template

VALID_ENV = """\
# docker-dev-wordpress settings
PHP_VERSION=8.2
WP_SITE_URL=https://wordpress.test
WP_EMAIL=wp@example.test
MYSQL_VERSION=8.0
MYSQL_USER=wordpress
MYSQL_PASSWORD="secret pass"
MYSQL_ROOT_PASSWORD='root'
MYSQL_DATABASE=wordpress
NGINX_VERSION=1.25
NGINX_SERVER_NAME=wordpress.test
COMPOSE_PROJECT_NAME=wpdev
NGINX_ENABLE_SSL=false
"""


def env_text(**overrides: str | None) -> str:
    """VALID_ENV with keys replaced, or dropped when the override is None."""
    lines = []
    for line in VALID_ENV.splitlines():
        key = line.split("=", 1)[0]
        if key in overrides:
            value = overrides.pop(key)
            if value is None:
                continue
            line = f"{key}={value}"
        lines.append(line)
    for key, value in overrides.items():
        if value is not None:
            lines.append(f"{key}={value}")
    return "\n".join(lines) + "\n"


class FakeRunner:
    """Stands in for run_cmd/cmd_ok and records every command."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.fail_on: str | None = None
        self.network_exists = True
        self.template_env = VALID_ENV

    def run(self, args, cwd: Path | None = None) -> None:
        self.calls.append(list(args))
        if self.fail_on and self.fail_on in " ".join(args):
            raise subprocess.CalledProcessError(1, args)
        if args[0] == "tar":
            dest = Path(args[args.index("-C") + 1])
            (dest / "docker").mkdir(exist_ok=True)
            (dest / "compose.yaml").write_text("services: {}\n")
            (dest / ".env.example").write_text(self.template_env)
            (dest / ".version").write_text("1.0.0\n")

    def probe(self, args) -> bool:
        self.calls.append(list(args))
        return self.network_exists

    def commands(self) -> list[str]:
        return [" ".join(c) for c in self.calls]

    def count(self, needle: str) -> int:
        return sum(1 for c in self.commands() if needle in c)


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path_factory, monkeypatch):
    monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path_factory.mktemp("log")))
    monkeypatch.setenv(RUN_ID_ENV, "testrun")


@pytest.fixture
def runner(monkeypatch) -> FakeRunner:
    fake = FakeRunner()
    monkeypatch.setattr(template, "run_cmd", fake.run)
    monkeypatch.setattr(docker, "run_cmd", fake.run)
    monkeypatch.setattr(docker, "cmd_ok", fake.probe)
    monkeypatch.setattr(certs, "run_cmd", fake.run)
    monkeypatch.setattr(wpbootstrap, "missing_dependency", lambda tools: None)
    return fake


@pytest.fixture
def workdir(tmp_path) -> Path:
    path = tmp_path / "site"
    path.mkdir()
    return path
