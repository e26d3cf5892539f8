import copy
import sys
from pathlib import Path

import pytest

import silo_wizard.core.config as wizard_config
from silo_wizard.core.clients.AddressBookClient import AddressBookClient
from silo_wizard.verification.versions import clear_version_cache

_repo_root = Path(__file__).parent.parent
_repo_root_str = str(_repo_root)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: mark test as integration")
    if _repo_root_str not in sys.path:
        sys.path.insert(0, _repo_root_str)


@pytest.fixture(autouse=True)
def _reset_process_caches():
    clear_version_cache()
    AddressBookClient.clear_cache()
    yield
    clear_version_cache()
    AddressBookClient.clear_cache()


@pytest.fixture
def restore_global_config():
    original = copy.deepcopy(wizard_config.CONFIG)
    yield
    wizard_config.set_config(original)
