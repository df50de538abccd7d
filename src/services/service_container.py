"""Service Container - Dependency injection container for all core services"""

from dataclasses import dataclass
from managers.config_manager import ConfigManager
from managers.color_manager import ColorManager
from services.config_store import ConfigStore
from services.event_bus import EventBus
from controllers.preview_controller import PreviewController
from controllers.color_picker_controller import ColorPickerController


@dataclass
class ServiceContainer:
    """
    Centralized dependency injection container for the configurator session.

    Services included:
    - config_store: The single configuration record and its merges
    - event_bus: Pub-sub event routing for decoupling components

    Controllers included:
    - preview: Visible blocks, drag & drop, device/theme toggles
    - color_picker: Primary color editing

    Managers included:
    - color_manager: Palette lookup
    - config_manager: Loaded YAML configuration

    Usage:
        # Create container during app startup
        services = ServiceContainer.build(config_manager)

        # API endpoints use services via Depends(get_service_container)
        @router.get("/config")
        async def get_config(services: ServiceContainer = Depends(get_service_container)):
            return services.config_store.to_dict()
    """

    config_store: ConfigStore
    event_bus: EventBus
    preview: PreviewController
    color_picker: ColorPickerController
    color_manager: ColorManager
    config_manager: ConfigManager

    @classmethod
    def build(cls, config_manager: ConfigManager, event_bus: EventBus = None) -> 'ServiceContainer':
        """
        Wire a session from a loaded ConfigManager

        Args:
            config_manager: ConfigManager after load()
            event_bus: Bus to use (a fresh one if omitted)
        """
        event_bus = event_bus or EventBus()
        store = ConfigStore(config_manager.default_widget_config(), event_bus)
        return cls(
            config_store=store,
            event_bus=event_bus,
            preview=PreviewController(store, event_bus),
            color_picker=ColorPickerController(store, config_manager.color_manager, event_bus),
            color_manager=config_manager.color_manager,
            config_manager=config_manager,
        )
