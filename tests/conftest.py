"""
Pytest configuration and shared fixtures for RecruitTrack tests.

Test Categories:
- unit: Fast tests with no filesystem access beyond tmp_path
- integration: Tests that run the full parse -> execute -> save loop

Run categories:
- pytest -m unit              # Fast unit tests only
- pytest -m "not integration" # Skip integration tests
- pytest                      # All tests
"""
import pytest

from recruit.services.address_book import Model
from recruit.services.person import IdentityPolicy
from recruit.services.storage import JsonAddressBookStorage
from tests.fixtures.typical_persons import get_typical_address_book


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (full command loop)")


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests whose name mentions integration."""
    for item in items:
        if "integration" in item.name or "end_to_end" in item.name:
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def model():
    """Model holding the typical persons, everyone visible."""
    return Model(get_typical_address_book())


@pytest.fixture
def expected_model():
    """Independent copy of the typical model, for comparing after a command."""
    return Model(get_typical_address_book())


@pytest.fixture
def empty_model():
    return Model()


@pytest.fixture
def data_file(tmp_path):
    """Path of a not-yet-existing data file inside a temp directory."""
    return tmp_path / "data" / "recruittrack.json"


@pytest.fixture
def storage(data_file):
    return JsonAddressBookStorage(data_file, identity=IdentityPolicy.NAME)


@pytest.fixture
def mock_settings(tmp_path, monkeypatch):
    """
    Settings pointing at temporary paths.

    Patches the global settings so nothing touches real data.
    """
    from config.settings import Settings

    mock = Settings(
        data_path=tmp_path / "recruittrack.json",
        backup_path=str(tmp_path / "backups"),
        seed_sample_data=False,
    )
    monkeypatch.setattr("config.settings.settings", mock)
    return mock
