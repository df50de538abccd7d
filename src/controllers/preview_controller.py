"""
Preview Controller

Orchestrates the live widget preview: visible auth blocks, drag & drop
reordering and the device / theme / mode toggles.
"""

from typing import Optional, Tuple, Union

from engine.ordered_list import reorder
from models.domain.widget_config import WidgetConfig
from models.enums import ComponentType, Device, Mode, Theme
from models.events import ComponentOrderChangedEvent, EventSource
from services.config_store import ConfigStore
from services.event_bus import EventBus
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ORDER)

BlockId = Union[ComponentType, str]


class PreviewController:
    """
    Preview surface orchestration controller

    Responsibilities:
        - Visible blocks (component order filtered by per-block enable flags)
        - Drag completion (source/target pair -> reorder -> store merge)
        - Device, theme and UI/code mode toggles

    Only visible blocks take part in a drag. Disabled blocks keep their slot
    in component_order and come back there when re-enabled.

    Args:
        store: ConfigStore holding the configuration record
        event_bus: Optional bus for ComponentOrderChangedEvent

    Example:
        >>> preview = PreviewController(store)
        >>> preview.visible_blocks()
        (ComponentType.EMAIL, ComponentType.SOCIAL, ...)
        >>> preview.complete_drag("sms", "passkey")   # sms is disabled by default
        False
    """

    def __init__(self, store: ConfigStore, event_bus: Optional[EventBus] = None):
        self.store = store
        self.event_bus = event_bus

    # ===== BLOCKS =====

    def visible_blocks(self, config: Optional[WidgetConfig] = None) -> Tuple[ComponentType, ...]:
        config = config or self.store.current()
        return tuple(block for block in config.component_order if config.is_block_enabled(block))

    # ===== DRAG & DROP =====

    def complete_drag(self, source_id: BlockId, target_id: Optional[BlockId]) -> bool:
        """
        Apply a finished drag gesture

        Dropping outside any block (target None), onto itself or onto a hidden
        block is a no-op.

        Args:
            source_id: Dragged block
            target_id: Block under the pointer at drop time

        Returns:
            True if the order changed
        """
        source = self._block(source_id)
        target = self._block(target_id)
        visible = self.visible_blocks()
        if source not in visible or target not in visible:
            log.debug("Drag ignored", source=str(source_id), target=str(target_id))
            return False

        order = self.store.current().component_order
        new_order = reorder(order, source, target)
        if new_order == order:
            return False

        self.store.update(component_order=new_order, source=EventSource.PREVIEW)
        if self.event_bus:
            self.event_bus.publish(ComponentOrderChangedEvent(
                source_id=source,
                target_id=target,
                order=new_order,
            ))

        log.info("Component order updated", order=",".join(block.value for block in new_order))
        return True

    # ===== TOGGLES =====

    def set_device(self, device: Union[Device, str]) -> None:
        self.store.update(device=EnumHelper.from_value(Device, device), source=EventSource.PREVIEW)

    def set_theme(self, theme: Union[Theme, str]) -> None:
        self.store.update(theme=EnumHelper.from_value(Theme, theme), source=EventSource.PREVIEW)

    def toggle_code_view(self) -> Mode:
        """Switch between the UI preview and the code view"""
        mode = Mode.CODE if self.store.current().mode is Mode.UI else Mode.UI
        self.store.update(mode=mode, source=EventSource.PREVIEW)
        return mode

    @staticmethod
    def _block(block_id: Optional[BlockId]) -> Optional[ComponentType]:
        if block_id is None:
            return None
        try:
            return EnumHelper.from_value(ComponentType, block_id)
        except ValueError:
            return None
