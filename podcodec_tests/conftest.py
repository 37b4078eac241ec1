from typing import Iterator

import pytest

from podcodec.conf import reset_global_settings
from podcodec.conf.get_settings import CONFIG_YAML_ENV_VAR


@pytest.fixture(autouse=True)
def _clean_global_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    reset_global_settings()
    yield
    reset_global_settings()
