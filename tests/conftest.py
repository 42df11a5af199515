import pytest

from gpucaps.config.settings import SPECS_DIR_ENV_VAR
from gpucaps.core import reset_spec_tables


@pytest.fixture
def specs_dir(tmp_path, monkeypatch):
    """Points the spec loader at an empty temporary directory."""
    monkeypatch.setenv(SPECS_DIR_ENV_VAR, str(tmp_path))
    reset_spec_tables()
    yield tmp_path
    monkeypatch.delenv(SPECS_DIR_ENV_VAR, raising=False)
    reset_spec_tables()
