import pytest
from glimmer_jsx.config import ENV_GLIMMER_JSX_KEEP_EMPTY_TEXT, ENV_GLIMMER_JSX_MAX_DEPTH


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	monkeypatch.delenv(ENV_GLIMMER_JSX_MAX_DEPTH, raising=False)
	monkeypatch.delenv(ENV_GLIMMER_JSX_KEEP_EMPTY_TEXT, raising=False)
