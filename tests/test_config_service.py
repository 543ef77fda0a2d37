"""ConfigService tests."""

import json

from src.services.config_service import DEFAULT_CONFIG, ConfigService


def test_missing_file_written_with_defaults(tmp_path):
    path = tmp_path / "stipple" / "config.json"

    config = ConfigService(path)

    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert config.default_tool == "PencilTool"
    assert config.theme == "dark"


def test_loaded_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"default_tool": "LineCurveTool", "window": {"width": 640}}),
        encoding="utf-8",
    )

    config = ConfigService(path)

    assert config.default_tool == "LineCurveTool"
    assert config.window_size == (640, DEFAULT_CONFIG["window"]["height"])
    assert config.log_level == "INFO"
    # New default keys are persisted back
    assert "log_to_file" in json.loads(path.read_text(encoding="utf-8"))


def test_corrupted_file_recreated(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    config = ConfigService(path)

    assert config.default_tool == DEFAULT_CONFIG["default_tool"]
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_non_object_file_recreated(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")

    config = ConfigService(path)

    assert config.get("theme") == "dark"


def test_set_and_save(tmp_path):
    path = tmp_path / "config.json"
    config = ConfigService(path)

    config.set("default_tool", "PanTool")
    config.save()

    assert ConfigService(path).default_tool == "PanTool"


def test_window_of_wrong_type_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window": None}), encoding="utf-8")

    config = ConfigService(path)

    default = DEFAULT_CONFIG["window"]
    assert config.window_size == (default["width"], default["height"])


def test_invalid_window_dimensions_fall_back_per_key(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"window": {"width": "wide", "height": 600}}),
        encoding="utf-8",
    )

    config = ConfigService(path)

    assert config.window_size == (DEFAULT_CONFIG["window"]["width"], 600)


def test_non_string_default_tool_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"default_tool": 3}), encoding="utf-8")

    config = ConfigService(path)

    assert config.default_tool == DEFAULT_CONFIG["default_tool"]


def test_log_keep_days(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_keep_days": 0}), encoding="utf-8")

    assert ConfigService(path).log_keep_days == DEFAULT_CONFIG["log_keep_days"]
