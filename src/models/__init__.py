"""
Models package - Data models for the auth widget configurator

Import records directly from their modules (models.color, models.domain,
models.events); only the enums are re-exported here.
"""

from .enums import ColorFormat, ColorNotation, ComponentType, LogLevel, LogCategory

__all__ = [
    'ColorFormat',
    'ColorNotation',
    'ComponentType',
    'LogLevel',
    'LogCategory',
]
