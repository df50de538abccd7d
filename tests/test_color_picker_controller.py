"""
Unit tests for ColorPickerController
"""

import pytest

from controllers.color_picker_controller import ColorPickerController
from models.enums import ColorFormat
from models.errors import UnknownPresetError
from models.events import EventSource, EventType


@pytest.fixture
def picker(store, color_manager, event_bus):
    return ColorPickerController(store, color_manager, event_bus)


def test_formatted_value_per_format(picker):
    assert picker.format is ColorFormat.HEX
    assert picker.formatted_value() == "#9333EA"

    picker.set_format("rgb")
    assert picker.formatted_value() == "rgb(147, 51, 234)"

    picker.set_format(ColorFormat.RGBA)
    assert picker.formatted_value() == "rgba(147, 51, 234, 1)"

    picker.set_format("hsl")
    assert picker.formatted_value() == "hsl(271, 81%, 56%)"


def test_partial_hex_is_draft_only(picker, store):
    """1-5 digits stay in the field, nothing reaches the store"""
    for text in ("#3", "#3B", "#3B8", "#3B82", "#3B82F"):
        assert picker.set_hex_text(text) is False
        assert store.current().primary_color == "#9333EA"

    assert picker.hex_draft == "3B82F"
    assert picker.formatted_value() == "#9333EA"

    assert picker.set_hex_text("#3b82f6") is True
    assert store.current().primary_color == "#3B82F6"
    assert picker.hex_draft == "3B82F6"
    print('✓ test_partial_hex_is_draft_only')


def test_invalid_hex_rejected(picker, store):
    picker.set_hex_text("#3B8")

    assert picker.set_hex_text("#3BZ") is False
    assert picker.set_hex_text("#3B82F6A") is False
    assert picker.hex_draft == "3B8"
    assert store.current().primary_color == "#9333EA"


def test_rgb_channel_edit_clamps(picker, store):
    assert picker.set_rgb_channel("r", 300) is True
    assert store.current().primary_color == "#FF33EA"


def test_alpha_stays_local(picker, store):
    picker.set_format("rgba")

    assert picker.set_rgba_channel("a", 0.5) is False
    assert store.current().primary_color == "#9333EA"
    assert picker.formatted_value() == "rgba(147, 51, 234, 0.5)"

    assert picker.set_rgba_channel("g", 0) is True
    assert store.current().primary_color == "#9300EA"
    assert picker.formatted_value() == "rgba(147, 0, 234, 0.5)"

    assert picker.set_rgba_channel("a", 7) is False
    assert picker.color.alpha == 1.0


def test_hsl_channel_edit(picker, store):
    picker.set_color_text("#FF0000")

    assert picker.set_hsl_channel("h", 120) is True
    assert store.current().primary_color == "#00FF00"

    picker.set_hsl_channel("h", 360)
    assert store.current().primary_color == "#FF0000"


def test_external_change_resyncs(picker, store):
    """Local state is re-derived from the new canonical value, never kept stale"""
    picker.set_rgba_channel("a", 0.5)
    picker.set_hex_text("#10")

    store.update(primaryColor="#3B82F6")

    picker.set_format("rgba")
    assert picker.formatted_value() == "rgba(59, 130, 246, 1)"
    assert picker.hex_draft == "3B82F6"
    assert picker.sync() is False


def test_set_color_text(picker, store):
    assert picker.set_color_text("not a color") is False
    assert store.current().primary_color == "#9333EA"

    assert picker.set_color_text("rgba(16, 185, 129, 0.25)") is True
    assert store.current().primary_color == "#10B981"
    assert picker.color.alpha == 0.25
    assert picker.active_preset() == "green"


def test_same_color_is_not_an_update(picker, store, event_bus):
    events = []
    event_bus.subscribe(EventType.PRIMARY_COLOR_CHANGED, events.append)
    version = store.version

    assert picker.set_color_text("rgb(147, 51, 234)") is False
    assert store.version == version
    assert events == []


def test_select_preset(picker, store):
    assert picker.active_preset() == "purple"

    assert picker.select_preset("blue") is True
    assert store.current().primary_color == "#3B82F6"

    presets = picker.presets()
    assert len(presets) == 12
    assert [p["name"] for p in presets if p["active"]] == ["blue"]

    with pytest.raises(UnknownPresetError):
        picker.select_preset("magenta")


def test_no_active_preset_for_custom_color(picker):
    picker.set_color_text("#123456")

    assert picker.active_preset() is None
    assert not any(p["active"] for p in picker.presets())


def test_commit_publishes_events(picker, store, event_bus):
    changes = []
    updates = []
    event_bus.subscribe(EventType.PRIMARY_COLOR_CHANGED, changes.append)
    event_bus.subscribe(EventType.CONFIG_UPDATED, updates.append)

    picker.select_preset("red")

    assert len(changes) == 1
    assert (changes[0].previous, changes[0].current) == ("#9333EA", "#EF4444")
    assert updates[0].source is EventSource.COLOR_PICKER
    assert updates[0].changed_fields == ("primary_color",)
