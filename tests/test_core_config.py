"""Tests for AppSettings and importing the package under STORECONF_* variables."""

import os
import subprocess
import sys
from pathlib import Path

from storeconf.core.config import AppSettings

repo_root = Path(__file__).parent.parent


def test_config_paths_from_comma_separated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STORECONF_CONFIG_PATHS", "/etc/storeconf/redis.yaml, /etc/storeconf/swift.json")

    assert AppSettings().CONFIG_PATHS == ["/etc/storeconf/redis.yaml", "/etc/storeconf/swift.json"]


def test_single_plain_path_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STORECONF_CONFIG_PATHS", "/etc/storeconf/redis.yaml")

    assert AppSettings().CONFIG_PATHS == ["/etc/storeconf/redis.yaml"]


def test_config_paths_default_and_list_kwarg(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STORECONF_CONFIG_PATHS", raising=False)

    assert AppSettings().CONFIG_PATHS == []
    assert AppSettings(CONFIG_PATHS=["a.yaml", "b.json"]).CONFIG_PATHS == ["a.yaml", "b.json"]


def test_package_imports_with_plain_path_env(tmp_path):
    env = {
        **os.environ,
        "STORECONF_CONFIG_PATHS": "/etc/storeconf/redis.yaml",
        "PYTHONPATH": os.pathsep.join(filter(None, [str(repo_root), os.environ.get("PYTHONPATH")])),
    }
    result = subprocess.run(
        [sys.executable, "-c", "import storeconf; print(storeconf.load({}).sections)"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "[]"
