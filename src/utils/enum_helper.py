"""Enum conversion utilities"""

from enum import Enum
from typing import TypeVar, Type, List, Any

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)

class EnumHelper:
    """
    Utility class for working with the configurator's value-backed Enums:
    - Render members as their wire value ("dark", "eip7702", ...)
    - Parse wire values or member names back to members (case-insensitive)
    - List all wire values
    """

    @staticmethod
    def to_value(enum_value: E) -> Any:
        """
        Convert Enum member to its wire value.

        Args:
            enum_value: Enum member

        Returns:
            Member .value (e.g. Theme.DARK -> "dark")
        """
        if not isinstance(enum_value, Enum):
            raise TypeError(f"Expected Enum, got {type(enum_value).__name__}")
        return enum_value.value

    @staticmethod
    def from_value(enum_class: Type[E], value: Any) -> E:
        """
        Parse a wire value or member name into an Enum member.

        Matching order: member instance, exact value, case-insensitive value,
        case-insensitive member name.

        Args:
            enum_class: Enum class to parse into
            value: Member, value ("1hour") or name ("HOUR_1")

        Returns:
            Enum member

        Raises:
            ValueError: If nothing matches
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if isinstance(value, enum_class):
            return value

        for member in enum_class:
            if member.value == value:
                return member

        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in enum_class:
                if str(member.value).lower() == wanted or member.name.lower() == wanted:
                    return member

        valid = ", ".join(str(v) for v in EnumHelper.list_values(enum_class))
        raise ValueError(f"Invalid {enum_class.__name__}: {value!r} (expected one of: {valid})")

    @staticmethod
    def list_values(enum_class: Type[E]) -> List[Any]:
        """
        List all Enum member values.

        Args:
            enum_class: Enum class to inspect

        Returns:
            List of .value for all members
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        return [member.value for member in enum_class]
