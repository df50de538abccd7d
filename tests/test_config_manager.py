"""
Unit tests for ConfigManager (YAML includes, fallback, widget defaults)
"""

from models.domain.widget_config import DEFAULT_COMPONENT_ORDER, WidgetConfig
from models.enums import Theme
from managers.config_manager import ConfigManager


def test_load_includes(config_manager):
    assert "presets" in config_manager.data
    assert "preset_order" in config_manager.data
    assert "widget" in config_manager.data


def test_default_widget_config_matches_builtin(config_manager):
    """defaults.yaml restates the built-in defaults"""
    assert config_manager.default_widget_config() == WidgetConfig()


def test_fallback_to_factory_defaults(tmp_path):
    manager = ConfigManager(config_path=str(tmp_path / "missing.yaml"))
    manager.load()

    assert manager.used_fallback is True
    assert len(manager.color_manager.presets) == 12
    assert manager.default_widget_config() == WidgetConfig()


def test_monolithic_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "presets:\n"
        "  blue: '#3B82F6'\n"
        "widget:\n"
        "  theme: light\n"
        "  primaryColor: 'rgb(59, 130, 246)'\n"
        "  cornerRadius: 4\n",
        encoding="utf-8",
    )
    manager = ConfigManager(config_path=str(path))
    manager.load()
    config = manager.default_widget_config()

    assert config.theme is Theme.LIGHT
    assert config.primary_color == "#3B82F6"
    assert config.corner_radius == 4
    assert manager.color_manager.preset_order == ["blue"]


def test_include_relative_to_config_dir(tmp_path):
    (tmp_path / "palette.yaml").write_text("presets:\n  red: '#EF4444'\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("include:\n  - palette.yaml\n", encoding="utf-8")

    manager = ConfigManager(config_path=str(tmp_path / "config.yaml"))
    manager.load()

    assert manager.color_manager.presets == {"red": "#EF4444"}
    assert manager.default_widget_config() == WidgetConfig()


def test_invalid_widget_section_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("widget:\n  theme: neon\n  sms: true\n", encoding="utf-8")

    manager = ConfigManager(config_path=str(path))
    manager.load()

    assert manager.default_widget_config() == WidgetConfig()


def test_invalid_default_color_replaced(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("widget:\n  primaryColor: plum\n  sms: true\n", encoding="utf-8")

    manager = ConfigManager(config_path=str(path))
    manager.load()
    config = manager.default_widget_config()

    assert config.primary_color == "#9333EA"
    assert config.sms is True


def test_main_file_keys_override_includes(tmp_path):
    (tmp_path / "defaults.yaml").write_text("widget:\n  theme: light\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text(
        "include:\n  - defaults.yaml\nwidget:\n  sms: true\n", encoding="utf-8"
    )

    manager = ConfigManager(config_path=str(tmp_path / "config.yaml"))
    manager.load()

    assert manager.used_fallback is False
    assert manager.widget == {"sms": True}


def test_non_mapping_config_falls_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    manager = ConfigManager(config_path=str(path))
    manager.load()

    assert manager.used_fallback is True
    assert manager.color_manager.preset_hex("purple") == "#9333EA"


def test_invalid_default_component_order_replaced(tmp_path):
    """A starting order that repeats or omits blocks falls back to the built-in order"""
    path = tmp_path / "config.yaml"
    path.write_text("widget:\n  componentOrder: [email, email]\n  theme: light\n", encoding="utf-8")

    manager = ConfigManager(config_path=str(path))
    manager.load()
    config = manager.default_widget_config()

    assert config.component_order == DEFAULT_COMPONENT_ORDER
    assert config.theme is Theme.LIGHT
