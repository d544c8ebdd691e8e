import pytest

from config import Settings
from library import LibrarySystem


@pytest.fixture
def settings():
    # Explicit values so a developer's .env cannot change test behavior
    return Settings(
        app_name="Library Management System",
        log_level="WARNING",
        output_mode="plain",
        array_capacity=10,
        seed_patrons="1001:Mandeep,1002:Cameron",
    )


@pytest.fixture
def lib(settings):
    system = LibrarySystem(settings)
    yield system
    system.close()
