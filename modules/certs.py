"""Trust the environment's self-signed nginx certificate on the host.

Best effort only: every failure ends in a manual-action warning.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from config import LOCAL_CA_DIR, MACOS_KEYCHAIN, SSL_CERT_PATH
from modules.env import Config
from modules.utils import log, report_warning, run_cmd

MANUAL_WARNING = "you have to add ssl certificate to your keychain manually."


def _trust_macos(cert: Path) -> None:
    run_cmd(
        [
            "sudo", "security", "add-trusted-cert",
            "-d", "-r", "trustRoot",
            "-k", MACOS_KEYCHAIN,
            str(cert),
        ]
    )


def _trust_debian(cert: Path, name: str) -> None:
    target = Path(LOCAL_CA_DIR) / f"{name or 'wpdev'}.crt"
    run_cmd(["sudo", "cp", str(cert), str(target)])
    run_cmd(["sudo", "update-ca-certificates"])


def install_local_trust(workdir: Path, config: Config) -> bool:
    if not config.ssl_enabled:
        log("SKIP: NGINX_ENABLE_SSL is not true")
        return False
    cert = workdir / SSL_CERT_PATH
    if not cert.exists():
        logging.warning("certificate not found: %s", cert)
        report_warning(MANUAL_WARNING)
        return False
    try:
        if shutil.which("security"):
            print("Installing ssl certificate into keychain...")
            _trust_macos(cert)
        elif shutil.which("update-ca-certificates"):
            print("Installing ssl certificate into system trust store...")
            _trust_debian(cert, config.project_name)
        else:
            report_warning(MANUAL_WARNING)
            return False
    except subprocess.CalledProcessError as err:
        logging.error("certificate install failed: exit=%s", err.returncode)
        report_warning(MANUAL_WARNING)
        return False
    except OSError as err:
        logging.error("certificate install failed: %s", err)
        report_warning(MANUAL_WARNING)
        return False
    log(f"PASS: Trusted certificate {cert}")
    return True
