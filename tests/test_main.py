from kids_keyboard.__main__ import apply_args, build_parser
from kids_keyboard.config import KeyboardConfig


def test_cli_options_override_config():
    args = build_parser().parse_args(
        ["--dark", "--no-sound", "--lowercase", "--history", "/tmp/h.json"]
    )
    cfg = apply_args(KeyboardConfig(), args)
    assert cfg.dark_theme is True
    assert cfg.sound is False
    assert cfg.upper_case is False
    assert cfg.history_file == "/tmp/h.json"
    assert cfg.haptics is True


def test_config_kept_without_options(monkeypatch):
    monkeypatch.delenv("KIDS_KEYBOARD_LAYOUT", raising=False)
    monkeypatch.delenv("KIDS_KEYBOARD_VOCABULARY", raising=False)
    saved = KeyboardConfig(layout="mine.json", dark_theme=True)
    cfg = apply_args(saved, build_parser().parse_args([]))
    assert cfg.layout == "mine.json"
    assert cfg.dark_theme is True
