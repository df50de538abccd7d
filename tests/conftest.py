"""
Shared fixtures for configurator tests

src/ is on the import path via [tool.pytest.ini_options] pythonpath.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import set_service_container
from api.main import create_app
from managers.color_manager import ColorManager
from managers.config_manager import ConfigManager
from models.domain.widget_config import WidgetConfig
from services.config_store import ConfigStore
from services.event_bus import EventBus
from services.service_container import ServiceContainer

PALETTE = {
    "purple": "#9333EA",
    "blue": "#3B82F6",
    "green": "#10B981",
    "amber": "#F59E0B",
    "red": "#EF4444",
    "violet": "#8B5CF6",
    "pink": "#EC4899",
    "cyan": "#06B6D4",
    "teal": "#14B8A6",
    "orange": "#F97316",
    "lime": "#84CC16",
    "indigo": "#6366F1",
}


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def store(event_bus):
    return ConfigStore(WidgetConfig(), event_bus)


@pytest.fixture
def color_manager():
    return ColorManager({"presets": dict(PALETTE), "preset_order": list(PALETTE)})


@pytest.fixture
def config_manager():
    manager = ConfigManager()
    manager.load()
    return manager


@pytest.fixture
def services(config_manager):
    return ServiceContainer.build(config_manager)


@pytest.fixture
def client(services):
    """TestClient bound to a fresh session"""
    set_service_container(services)
    with TestClient(create_app()) as test_client:
        yield test_client
    set_service_container(None)
