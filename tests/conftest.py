import pytest


@pytest.fixture(autouse=True)
def settings_home(tmp_path, monkeypatch):
    # keep every test away from the real settings directory
    home = tmp_path / "passgauge-home"
    monkeypatch.setenv("PASSGAUGE_HOME", str(home))
    return home
