# tests/conftest.py
import logging
import shutil
from pathlib import Path

import pytest
import yaml

from hiera.utils import component_registry
from hiera.utils.component_registry import BackendCache, BackendRegistry


@pytest.fixture
def scope():
    """A typical node scope."""
    return {"environment": "production", "fqdn": "web01.example.com", "role": "web"}


@pytest.fixture
def registry():
    """An empty backend registry, isolated from the process default."""
    return BackendRegistry()


@pytest.fixture
def cache():
    return BackendCache()


@pytest.fixture
def write_yaml():
    """Write *data* as YAML to *path*, creating parent dirs."""
    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            yaml.safe_dump(data, fh)
        return path
    return _write


@pytest.fixture(autouse=True)
def isolate_fs(tmp_path: Path, monkeypatch):
    """Prevent tests from accidentally touching real project files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HIERA_CONFIG", raising=False)
    yield
    # cleanup
    shutil.rmtree(tmp_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_process_state():
    """Reset the process-wide backend cache and the ``hiera`` logger."""
    lib_logger = logging.getLogger("hiera")
    handlers, propagate, level = list(lib_logger.handlers), lib_logger.propagate, lib_logger.level
    component_registry.instances.reset()
    yield
    component_registry.instances.reset()
    lib_logger.handlers[:] = handlers
    lib_logger.propagate = propagate
    lib_logger.setLevel(level)
