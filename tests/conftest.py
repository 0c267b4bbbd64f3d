import typing as t

import pytest

from update_deps.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> t.Generator[None, None, None]:
    """Unset every variable read by Config and drop the shared instance"""
    for setting in Config.settings():
        monkeypatch.delenv(setting.env_var, raising=False)
    Config._reset()  # pylint: disable=protected-access
    yield
    Config._reset()  # pylint: disable=protected-access
