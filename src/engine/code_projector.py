"""
Code projector - Renders a WidgetConfig into exportable text

Two artifacts:
- to_snippet(): declarative <SmartWalletAuth /> component block
- to_document(): full JSON dump of the record

Both are pure and deterministic: the same record always yields the same
characters (no timestamps, ids or environment lookups).
"""

import json
from typing import Any, Dict, List, Optional

from models.domain.widget_config import WidgetConfig
from utils.logger import get_logger, LogCategory
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.EXPORT)

COMPONENT_TAG = "SmartWalletAuth"
WALLET_PROVIDERS = ("smartWallet", "metamask", "coinbase")
INDENT = "  "


# ============================================================================
# VALUE RENDERING
# ============================================================================

def _literal(value: Any) -> str:
    """Render a scalar as a JS literal (true/false, 12, "text")"""
    value = Serializer.to_plain(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, ensure_ascii=False)


def _list(items) -> str:
    return "[" + ", ".join(_literal(item) for item in items) + "]"


def _object(name: str, entries: Dict[str, Any], depth: int = 1) -> List[str]:
    """
    Render an object literal, one entry per line

    Nested dicts become nested blocks; the last entry has no trailing comma.
    """
    pad = INDENT * depth
    lines = [f"{pad}{name}: {{" if depth > 1 else f"{pad}{name}={{{{"]
    keys = list(entries)
    for i, key in enumerate(keys):
        value = entries[key]
        comma = "," if i < len(keys) - 1 else ""
        if isinstance(value, dict):
            nested = _object(key, value, depth + 1)
            nested[-1] += comma
            lines.extend(nested)
        elif isinstance(value, (list, tuple)):
            lines.append(f"{pad}{INDENT}{key}: {_list(value)}{comma}")
        else:
            lines.append(f"{pad}{INDENT}{key}: {_literal(value)}{comma}")
    lines.append(f"{pad}}}" if depth > 1 else f"{pad}}}}}")
    return lines


# ============================================================================
# LOGO BLOCK
# ============================================================================

def logo_block(config: WidgetConfig) -> Optional[Dict[str, Any]]:
    """
    Nested logo settings as emitted in the snippet

    Returns:
        Ordered dict, or None while the logo isn't active (disabled or no image)
    """
    if not config.logo_active:
        return None

    logo = config.logo
    if logo.shadow_enabled:
        shadow = {
            "enabled": True,
            "color": logo.shadow_color,
            "blur": logo.shadow_blur,
            "offsetX": logo.shadow_offset_x,
            "offsetY": logo.shadow_offset_y,
        }
    else:
        shadow = {"enabled": False}

    if logo.header_border_enabled:
        border = {
            "enabled": True,
            "color": logo.header_border_color,
            "width": logo.header_border_width,
        }
    else:
        border = {"enabled": False}

    block = {
        "enabled": True,
        "image": config.custom_logo,
        "replaceTitle": logo.replace_title,
        "size": logo.size,
        "customSize": logo.custom_size,
        "width": logo.width,
        "height": logo.height,
        "maintainAspectRatio": logo.maintain_aspect_ratio,
        "position": {
            "horizontal": logo.position_horizontal,
            "vertical": logo.position_vertical,
        },
        "spacing": {
            "top": logo.spacing_top,
            "bottom": logo.spacing_bottom,
            "left": logo.spacing_left,
            "right": logo.spacing_right,
        },
        "opacity": logo.opacity,
        "borderRadius": logo.border_radius,
        "shadow": shadow,
        "header": {
            "height": logo.header_height,
            "backgroundColor": logo.header_background_color,
            "padding": {
                "horizontal": logo.header_padding_horizontal,
                "vertical": logo.header_padding_vertical,
            },
            "border": border,
        },
        "responsive": {
            "mobile": logo.responsive_mobile,
            "tablet": logo.responsive_tablet,
            "desktop": logo.responsive_desktop,
        },
        "animation": logo.animation,
    }
    return Serializer.to_plain(block)


# ============================================================================
# ARTIFACTS
# ============================================================================

def to_snippet(config: WidgetConfig) -> str:
    """
    Render the declarative component snippet

    Example (defaults, abbreviated):
        <SmartWalletAuth
          email={true}
          ...
          componentOrder={["email", "sms", "social", "passkey", "external"]}
          ...
        />
    """
    lines = [f"<{COMPONENT_TAG}"]

    for flag in ("email", "sms", "social", "passkey", "external"):
        lines.append(f"{INDENT}{flag}={{{_literal(getattr(config, flag))}}}")

    lines.extend(_object("wallets", {
        "smartAccount": config.account_type,
        "external": config.external,
        "providers": WALLET_PROVIDERS,
    }))

    networks = [network.lower() for network in config.networks]
    lines.append(f"{INDENT}networks={{{_list(networks)}}}")

    lines.extend(_object("branding", {
        "theme": config.theme,
        "primaryColor": config.primary_color,
        "cornerRadius": config.corner_radius,
        "fontFamily": config.font_family,
    }))

    lines.append(f"{INDENT}componentOrder={{{_list(config.component_order)}}}")

    lines.extend(_object("accountConfig", {
        "accountType": config.account_type,
        "entryPoint": config.entry_point,
        "paymaster": config.paymaster,
    }))

    if config.limits:
        spending_limit = {
            "enabled": True,
            "amount": config.spending_limit,
            "currency": config.spending_limit_currency,
        }
    else:
        spending_limit = {"enabled": False}

    lines.extend(_object("sessionConfig", {
        "persistence": config.persistence,
        "duration": config.duration,
        "spendingLimit": spending_limit,
    }))

    logo = logo_block(config)
    if logo is not None:
        logo_json = json.dumps(logo, indent=2, ensure_ascii=False)
        lines.append(f"{INDENT}logo={{" + logo_json.replace("\n", "\n" + INDENT) + "}")

    lines.append("/>")

    log.debug("Snippet rendered", lines=len(lines), logo=logo is not None)
    return "\n".join(lines)


def to_document(config: WidgetConfig) -> str:
    """
    Render the whole record as JSON

    Keys follow field declaration order (camelCase), nothing is omitted
    regardless of flags, nested records become nested objects.
    """
    return json.dumps(Serializer.record_to_dict(config), indent=2, ensure_ascii=False)
