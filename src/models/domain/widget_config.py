"""Widget configuration domain model"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.enums import (
    AccountType,
    ComponentType,
    Currency,
    Device,
    HorizontalPosition,
    LogoAnimation,
    LogoSize,
    Mode,
    Persistence,
    Preset,
    SessionDuration,
    Theme,
    VerticalPosition,
)

DEFAULT_COMPONENT_ORDER: Tuple[ComponentType, ...] = tuple(ComponentType)


@dataclass(frozen=True)
class LogoSettings:
    """
    Custom logo presentation settings

    Only meaningful while WidgetConfig.logo_active is True. The values are kept
    (and dumped in the full document) even when the logo is disabled so that
    re-enabling it restores the previous look.
    """

    replace_title: bool = False
    size: LogoSize = LogoSize.MEDIUM
    custom_size: int = 64
    width: int = 120
    height: int = 40
    maintain_aspect_ratio: bool = True

    # === Position & spacing ===
    position_horizontal: HorizontalPosition = HorizontalPosition.CENTER
    position_vertical: VerticalPosition = VerticalPosition.TOP
    spacing_top: int = 16
    spacing_bottom: int = 16
    spacing_left: int = 0
    spacing_right: int = 0

    # === Appearance ===
    opacity: int = 100
    border_radius: int = 0
    shadow_enabled: bool = False
    shadow_color: str = "#000000"
    shadow_blur: int = 8
    shadow_offset_x: int = 0
    shadow_offset_y: int = 4

    # === Header ===
    header_height: int = 80
    header_background_color: str = "transparent"
    header_padding_horizontal: int = 16
    header_padding_vertical: int = 12
    header_border_enabled: bool = False
    header_border_color: str = "#333333"
    header_border_width: int = 1

    # === Responsive caps (px) ===
    responsive_mobile: int = 48
    responsive_tablet: int = 56
    responsive_desktop: int = 64

    animation: LogoAnimation = LogoAnimation.NONE


@dataclass(frozen=True)
class WidgetConfig:
    """
    The single configuration record of a configurator session

    Field declaration order is the key order of the exported document.
    Snapshots are immutable; ConfigStore replaces the whole record on every merge.

    Default values defined here are the single source of truth; defaults.yaml
    may override them at session start.
    """

    # === Auth methods ===
    email: bool = True
    sms: bool = False
    social: bool = True
    passkey: bool = True
    external: bool = True
    limits: bool = True

    # === Workspace ===
    mode: Mode = Mode.UI
    preset: Preset = Preset.FULL
    theme: Theme = Theme.DARK
    primary_color: str = "#9333EA"
    networks: Tuple[str, ...] = ("Hyperion",)
    device: Device = Device.MOBILE
    advanced_options: bool = False
    component_order: Tuple[ComponentType, ...] = DEFAULT_COMPONENT_ORDER

    # === Account ===
    account_type: AccountType = AccountType.EIP7702
    entry_point: str = "0x0000000071727De22E5E9d8BAf0edAc6f37da032"
    paymaster: bool = False

    # === Session ===
    persistence: Persistence = Persistence.DEVICE
    duration: SessionDuration = SessionDuration.HOUR_1
    spending_limit: float = 1000
    spending_limit_currency: Currency = Currency.USD

    # === Branding ===
    corner_radius: int = 12
    font_family: str = "Inter"

    # === Logo ===
    custom_logo_enabled: bool = False
    custom_logo: Optional[str] = None
    logo: LogoSettings = field(default_factory=LogoSettings)

    @property
    def logo_active(self) -> bool:
        """Logo settings apply only when enabled AND a non-empty image is set"""
        return self.custom_logo_enabled and bool(self.custom_logo)

    def is_block_enabled(self, block: ComponentType) -> bool:
        """Per-block enable flag (the flag shares the block's name)"""
        return bool(getattr(self, ComponentType(block).value))
