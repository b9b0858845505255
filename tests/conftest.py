from __future__ import annotations

import pytest

from codexsync.domain.model import AuthoritativeStatic  # noqa: TC001
from tests.helpers.catalog import make_static


@pytest.fixture
def static() -> AuthoritativeStatic:
    return make_static()


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path_factory: pytest.TempPathFactory,
) -> None:
    monkeypatch.delenv("CODEXSYNC_KINDS", raising=False)
    monkeypatch.setenv("CODEXSYNC_DATA_DIR", str(tmp_path_factory.mktemp("codexsync-data")))
