import os
import sys
import pytest

# Ensure engine modules can be imported
sys.path.append(os.getcwd())


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from engine.core.events import EventBus
    return EventBus()


@pytest.fixture
def switches():
    """Empty switch store."""
    from engine.core.state import GameSwitches
    return GameSwitches()


@pytest.fixture
def variables():
    """Empty variable store."""
    from engine.core.state import GameVariables
    return GameVariables()


@pytest.fixture
def kv_store():
    """In-memory stand-in for browser storage."""
    from common_save.kvstore import MemoryKeyValueStore
    return MemoryKeyValueStore()


@pytest.fixture
def save_dir(tmp_path):
    """Save directory that does not exist yet."""
    return tmp_path / "save"


@pytest.fixture
def make_manager(switches, variables, save_dir):
    """Factory for managers over the shared live stores, file-backed by default."""
    from common_save.config import CommonSaveConfig
    from common_save.manager import CommonSaveManager
    from common_save.storage import FileStorage

    def _make(parameters=None, storage=None, event_bus=None):
        config = CommonSaveConfig.from_parameters(parameters or {})
        return CommonSaveManager(
            config,
            switches,
            variables,
            storage=storage or FileStorage(save_dir),
            event_bus=event_bus,
        )

    return _make
