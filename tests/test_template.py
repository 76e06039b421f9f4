from __future__ import annotations

import os

from config import TEMPLATE_ARCHIVE_URL
from modules.template import init_project
from tests.conftest import VALID_ENV


def test_init_project_downloads_extracts_and_copies_env(workdir, runner):
    assert init_project(workdir)
    curl, tar = runner.calls
    assert curl[0] == "curl"
    assert curl[-1] == TEMPLATE_ARCHIVE_URL
    assert tar[0] == "tar"
    assert "--strip-components=1" in tar
    assert tar[tar.index("-C") + 1] == str(workdir)
    assert (workdir / ".env").read_text() == VALID_ENV
    assert (workdir / ".env.example").exists()


def test_temporary_archive_is_removed(workdir, runner):
    init_project(workdir)
    archive = runner.calls[0][runner.calls[0].index("-o") + 1]
    assert not os.path.exists(archive)


def test_download_failure_is_reported(workdir, runner):
    runner.fail_on = "curl"
    assert not init_project(workdir)
    assert runner.count("tar") == 0
    assert not (workdir / ".env").exists()


def test_missing_env_template_fails(workdir, runner, monkeypatch):
    def tar_without_template(args, cwd=None):
        runner.calls.append(list(args))

    monkeypatch.setattr("modules.template.run_cmd", tar_without_template)
    assert not init_project(workdir)
    assert not (workdir / ".env").exists()
