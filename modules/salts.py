"""WordPress auth keys and salts.

Generated once per environment into SECRETS_FILE; the file's presence alone
guards against regeneration.
"""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path

from config import SECRET_ALPHABET, SECRET_KEYS, SECRET_LENGTH, SECRETS_FILE
from modules.utils import log, report_warning

SECRETS_MODE = 0o600


def random_secret(rng: random.Random, length: int = SECRET_LENGTH) -> str:
    return "".join(rng.choice(SECRET_ALPHABET) for _ in range(length))


def generate_secrets() -> dict[str, str]:
    # SystemRandom reads os.urandom; NotImplementedError when no source exists
    rng = random.SystemRandom()
    return {name: random_secret(rng) for name in SECRET_KEYS}


def render_secrets(secrets: dict[str, str]) -> str:
    return "".join(f'{name}="{value}"\n' for name, value in secrets.items())


def ensure_secrets(workdir: Path) -> bool:
    """Write SECRETS_FILE unless it already exists.

    Returns True when the file exists afterwards. A missing randomness source
    is not fatal: a warning is shown and the caller carries on.
    """
    path = workdir / SECRETS_FILE
    if path.exists():
        log(f"SKIP: {SECRETS_FILE} already present")
        return True
    try:
        secrets = generate_secrets()
    except NotImplementedError as err:
        logging.warning("no randomness source: %s", err)
        report_warning(
            f"could not generate secrets; add them to {SECRETS_FILE} manually."
        )
        return False
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, SECRETS_MODE)
    except FileExistsError:
        log(f"SKIP: {SECRETS_FILE} created concurrently")
        return True
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        fh.write(render_secrets(secrets))
    log(f"PASS: Wrote {len(secrets)} secrets to {path}")
    return True
