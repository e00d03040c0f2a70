import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from orebank.core.db import base
from orebank.core.db.migrations import migrate_if_needed
from orebank.core.local_world import LocalWorld
from orebank.domain import collection
from orebank.domain.collection import ObtainedItemRegistry


@pytest.fixture()
def db(tmp_path):
    base.use_path(str(tmp_path / "orebank-test.db"))
    migrate_if_needed(base.get_conn())
    yield base.get_conn()
    base.close_conn()


@pytest.fixture()
def world(db):
    return LocalWorld()


@pytest.fixture()
def registry():
    return ObtainedItemRegistry()


@pytest.fixture(autouse=True)
def _clean_obtained_items():
    # Registre global du process: vidé autour de chaque test
    collection.registry.reset()
    yield
    collection.registry.reset()
