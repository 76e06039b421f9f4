"""Load and validate the environment's .env configuration.

Checks run in a fixed order and stop at the first violation, so a broken
file reports exactly one problem per attempt.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from config import ENV_FILE, REQUIRED_ENV_KEYS
from modules.utils import log, report_error

VERSION_RE = re.compile(r"^[0-9]+(\.[0-9]+){0,2}$")
SITE_URL_RE = re.compile(r"^https?://[-A-Za-z0-9:@/_.]*$")
EMAIL_RE = re.compile(r"^[-_.+A-Za-z0-9]+@[-_.+A-Za-z0-9]+\.[A-Za-z]+$")
SERVER_NAME_RE = re.compile(r"^[-.A-Za-z0-9]+$")

FORMAT_CHECKS = (
    ("PHP_VERSION", VERSION_RE),
    ("WP_SITE_URL", SITE_URL_RE),
    ("WP_EMAIL", EMAIL_RE),
    ("MYSQL_VERSION", VERSION_RE),
    ("NGINX_VERSION", VERSION_RE),
    ("NGINX_SERVER_NAME", SERVER_NAME_RE),
)

EDIT_PROMPT = f"Edit the '{ENV_FILE}' file, and press enter key to continue:"


@dataclass(frozen=True)
class Config:
    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)

    @property
    def ssl_enabled(self) -> bool:
        return self.get("NGINX_ENABLE_SSL") == "true"

    @property
    def project_name(self) -> str:
        return self.get("COMPOSE_PROJECT_NAME")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def parse_env(text: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = _unquote(value.strip())
    return values


def load_env(workdir: Path) -> dict[str, str] | None:
    path = workdir / ENV_FILE
    if not path.exists():
        return None
    return parse_env(path.read_text(encoding="utf-8"))


def check_values(values: Mapping[str, str]) -> list[str]:
    for key in REQUIRED_ENV_KEYS:
        if not values.get(key):
            return [f"{key} is required environment variable"]
    for key, pattern in FORMAT_CHECKS:
        if not pattern.match(values[key]):
            return [f"{key} is not set or is invalid"]
    return []


def validate_env(workdir: Path) -> Tuple[Config | None, list[str]]:
    try:
        values = load_env(workdir)
    except (OSError, UnicodeDecodeError) as err:
        values = None
        errors = [f"{ENV_FILE} could not be read: {err}"]
    else:
        if values is None:
            errors = [f"{ENV_FILE} file not found in {workdir}"]
        else:
            errors = check_values(values)
    for err in errors:
        report_error(err)
    if errors:
        return None, errors
    log(f"PASS: {ENV_FILE} validated")
    return Config(values), []


def prompt_until_valid(
    workdir: Path, read_line: Callable[[str], str] = input
) -> Config:
    """Block on the user until .env validates; there is no attempt limit."""
    attempt = 0
    while True:
        attempt += 1
        read_line(EDIT_PROMPT)
        log(f"validating {ENV_FILE}, attempt {attempt}")
        config, _ = validate_env(workdir)
        if config is not None:
            return config
