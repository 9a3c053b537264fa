import json

import pytest

from termreader.config import Color, ConfigData, ConfigError, Modifier, Style


def test_defaults():
    cfg = ConfigData()
    assert cfg.selected_style.fg is Color.GREEN
    assert cfg.selected_style_2.fg is Color.YELLOW
    assert cfg.unselected_style.fg is Color.WHITE
    assert cfg.greyed_style.fg is Color.DARK_GRAY
    assert cfg.prompt_style is None


def test_save_load_round_trip(tmp_path):
    cfg = ConfigData(
        selected_style=Style(fg=Color.RED, bg=Color.BLACK, add_modifier=Modifier.BOLD | Modifier.ITALIC),
        greyed_style=Style(fg=Color.GRAY),
    )
    cfg.save(tmp_path)
    loaded = ConfigData.load(tmp_path)
    assert loaded == cfg


def test_prompt_style_not_saved(tmp_path):
    cfg = ConfigData(prompt_style=Style(fg=Color.BLUE))
    cfg.save(tmp_path)
    data = json.loads((tmp_path / "config.json").read_text())
    assert "prompt_style" not in data
    assert ConfigData.load(tmp_path).prompt_style is None


def test_color_names_in_file(tmp_path):
    ConfigData().save(tmp_path)
    data = json.loads((tmp_path / "config.json").read_text())
    assert data["greyed_style"]["fg"] == "DarkGray"


def test_missing_file_gives_defaults(tmp_path):
    assert ConfigData.load(tmp_path) == ConfigData()


def test_malformed_file_raises(tmp_path):
    (tmp_path / "config.json").write_text("{not json")
    with pytest.raises(ConfigError):
        ConfigData.load(tmp_path)


def test_missing_field_raises(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"selected_style": {}}))
    with pytest.raises(ConfigError):
        ConfigData.load(tmp_path)


def test_unknown_color_raises():
    with pytest.raises(ConfigError):
        Style.from_dict({"fg": "Chartreuse"})


def test_style_dict_round_trip():
    style = Style(fg=Color.CYAN, sub_modifier=Modifier.DIM | Modifier.REVERSED)
    assert Style.from_dict(style.to_dict()) == style


def test_prompt_style_fallback_and_reset():
    cfg = ConfigData()
    assert cfg.resolved_prompt_style() == cfg.selected_style
    custom = Style(fg=Color.MAGENTA)
    cfg.prompt_style = custom
    assert cfg.resolved_prompt_style() == custom
    cfg.reset_styles()
    assert cfg.resolved_prompt_style() == cfg.selected_style