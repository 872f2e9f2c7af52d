import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # keep tests away from the user's real settings file
    path = tmp_path / "config.json"
    monkeypatch.setenv("PASSGEN_CONFIG", str(path))
    return path
