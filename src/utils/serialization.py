"""
Serialization utilities - Record <-> dict conversion for documents and the JSON API

Provides bidirectional conversion between:
- Frozen dataclass records (WidgetConfig, LogoSettings) -> ordered camelCase dicts
- Loose partial dicts (camelCase or snake_case keys, wire values) -> typed field values

Key order of the produced dicts is the dataclass field declaration order, which
makes every document built from them deterministic.
"""

from dataclasses import fields, is_dataclass, replace
from enum import Enum
from inspect import isclass
from typing import Any, Dict, Optional, Union, get_args, get_origin, get_type_hints

from models.errors import InvalidConfigValueError, UnknownConfigFieldError
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.GENERAL)

# Numeric fields that clamp at zero instead of rejecting negative input
NON_NEGATIVE_FIELDS = {"spending_limit", "corner_radius"}


class Serializer:
    """Central record serialization for documents and the JSON API"""

    # ========================================================================
    # KEY NAMES
    # ========================================================================

    @staticmethod
    def to_camel(name: str) -> str:
        """
        snake_case field name -> camelCase document key

        Example:
            Serializer.to_camel("spending_limit_currency")  # "spendingLimitCurrency"
            Serializer.to_camel("shadow_offset_x")          # "shadowOffsetX"
        """
        head, *rest = name.split("_")
        return head + "".join(part[:1].upper() + part[1:] for part in rest)

    @staticmethod
    def field_names(record_type) -> Dict[str, str]:
        """Map every accepted key (snake_case and camelCase) to its field name"""
        names = {}
        for f in fields(record_type):
            names[f.name] = f.name
            names[Serializer.to_camel(f.name)] = f.name
        return names

    # ========================================================================
    # RECORD -> DICT
    # ========================================================================

    @staticmethod
    def to_plain(value: Any) -> Any:
        """
        Convert a field value to a JSON-compatible value

        Enums become their wire value, tuples become lists, nested records become
        dicts and integral floats become ints (1000.0 -> 1000).
        """
        if isinstance(value, Enum):
            return EnumHelper.to_value(value)
        if is_dataclass(value) and not isinstance(value, type):
            return Serializer.record_to_dict(value)
        if isinstance(value, dict):
            return {key: Serializer.to_plain(v) for key, v in value.items()}
        if isinstance(value, (tuple, list)):
            return [Serializer.to_plain(v) for v in value]
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @staticmethod
    def record_to_dict(record) -> Dict[str, Any]:
        """
        Serialize a record to an ordered dict with camelCase keys

        Every declared field is present, including None values and
        fields of disabled features.
        """
        return {
            Serializer.to_camel(f.name): Serializer.to_plain(getattr(record, f.name))
            for f in fields(record)
        }

    # ========================================================================
    # DICT -> FIELD VALUES
    # ========================================================================

    @staticmethod
    def coerce_field(record_type, name: str, value: Any, current: Any = None) -> Any:
        """
        Coerce a loose value into the declared type of record_type.<name>

        Args:
            record_type: Dataclass type owning the field
            name: snake_case field name
            value: Incoming value (wire value, list, dict for nested records)
            current: Current value of the field (needed to merge nested records)

        Returns:
            Typed value ready for dataclasses.replace()

        Raises:
            InvalidConfigValueError: If value doesn't fit the field type
        """
        target = get_type_hints(record_type)[name]
        try:
            coerced = Serializer._coerce(target, value, name, current)
        except (TypeError, ValueError) as ex:
            raise InvalidConfigValueError(name, value, str(ex)) from ex

        if name in NON_NEGATIVE_FIELDS and coerced < 0:
            log.debug("Clamped negative value", field=name, value=coerced)
            coerced = type(coerced)(0)
        return coerced

    @staticmethod
    def _coerce(target, value: Any, name: str, current: Any) -> Any:
        origin = get_origin(target)

        if origin is Union:
            # Optional[X]: None clears the field
            if value is None:
                return None
            inner = [arg for arg in get_args(target) if arg is not type(None)][0]
            return Serializer._coerce(inner, value, name, current)

        if origin is tuple:
            if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
                raise TypeError(f"expected a list, got {type(value).__name__}")
            item_type = get_args(target)[0]
            return tuple(Serializer._coerce(item_type, item, name, None) for item in value)

        if target is bool:
            if not isinstance(value, bool):
                raise TypeError(f"expected a boolean, got {type(value).__name__}")
            return value

        if target is int:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"expected an integer, got {type(value).__name__}")
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"expected an integer, got {value}")
            return int(value)

        if target is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"expected a number, got {type(value).__name__}")
            return float(value)

        if target is str:
            if not isinstance(value, str):
                raise TypeError(f"expected a string, got {type(value).__name__}")
            return value

        if isclass(target) and issubclass(target, Enum):
            return EnumHelper.from_value(target, value)

        if is_dataclass(target):
            if isinstance(value, target):
                return value
            if not isinstance(value, dict):
                raise TypeError(f"expected an object, got {type(value).__name__}")
            base = current if current is not None else target()
            return replace(base, **Serializer.partial_from_dict(target, value, base))

        raise TypeError(f"unsupported field type {target!r}")

    @staticmethod
    def partial_from_dict(record_type, data: Dict[str, Any], current: Optional[Any] = None) -> Dict[str, Any]:
        """
        Convert a partial update dict into typed field values

        All keys are resolved and all values coerced before anything is
        returned, so a bad entry rejects the whole partial.

        Args:
            record_type: Dataclass type the partial applies to
            data: Partial with camelCase or snake_case keys
            current: Current record (nested records merge field-wise into it)

        Returns:
            {snake_case_field: typed_value}

        Raises:
            UnknownConfigFieldError: If any key isn't a field of record_type
            InvalidConfigValueError: If any value doesn't fit its field
        """
        names = Serializer.field_names(record_type)
        unknown = [key for key in data if key not in names]
        if unknown:
            raise UnknownConfigFieldError(unknown)

        coerced = {}
        for key, value in data.items():
            name = names[key]
            current_value = getattr(current, name) if current is not None else None
            coerced[name] = Serializer.coerce_field(record_type, name, value, current_value)
        return coerced

    @staticmethod
    def record_from_dict(record_type, data: Dict[str, Any]):
        """Build a record from defaults overridden by data (used for defaults.yaml)"""
        base = record_type()
        return replace(base, **Serializer.partial_from_dict(record_type, data or {}, base))
