import pytest

import stringdoc.common
from stringdoc.test_utils import WorkspaceFactory


@pytest.fixture(autouse=True)
def _silent_bus(monkeypatch):
    # CLI runs install a renderer on the global bus; keep tests independent.
    monkeypatch.setattr(stringdoc.common.bus, "_renderer", None)


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # Each test runs inside its own empty project directory.
    factory = WorkspaceFactory(tmp_path)
    monkeypatch.chdir(tmp_path)
    return factory
