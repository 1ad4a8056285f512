from collections.abc import Generator

import pytest

from objpath.config import ObjPathConfig
from objpath.testing import objpath_env, objpath_test_env  # noqa: F401


@pytest.fixture(autouse=True)
def _isolated_objpath() -> Generator[ObjPathConfig, None, None]:
    with objpath_test_env() as config:
        yield config
