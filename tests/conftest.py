import pytest

from sceneblocks import Workspace


@pytest.fixture
def workspace():
    return Workspace()
