import pytest

from tombkeeper import ui
from tombkeeper.config import ColorTheme, TombConfig
from tombkeeper.events import DOWN, ESC, UP, Context, KeyEvent, LoopEvent
from tombkeeper.locations_config import TombConfiguration, create_location_fields


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setenv("TOMB_LOG", str(tmp_path / "tomb.log"))


def make_config():
    return TombConfig.create("key.yaml", "tomb.yaml", "tomb.log", ColorTheme.builtin())


def test_create_location_fields():
    config = make_config()
    fields = create_location_fields(config)
    assert [f.id for f in fields] == ["key_filename", "tomb_filename", "log_filename"]
    assert [f.title for f in fields] == ["key_filename", "tomb_filename", "log_filename"]
    assert [f.value for f in fields] == [
        config.key_filename,
        config.tomb_filename,
        config.log_filename,
    ]
    assert all(f.read_only for f in fields)


def test_fields_are_read_only():
    config = make_config()
    panel = TombConfiguration(config)
    panel.process_keyboard(KeyEvent(DOWN), Context())
    panel.form.sync_focus()
    assert panel.process_keyboard(KeyEvent("x"), Context()) is LoopEvent.REFRESH
    assert panel.form.fields[0].value == config.key_filename


def test_up_and_down_move_selection():
    panel = TombConfiguration(make_config())
    panel.process_keyboard(KeyEvent(UP), Context())
    assert panel.form.selected_index == len(panel.form.fields) - 1
    panel.process_keyboard(KeyEvent(DOWN), Context())
    assert panel.form.selected_index == 0


def test_escape_blurs_form():
    panel = TombConfiguration(make_config())
    panel.process_keyboard(KeyEvent(DOWN), Context())
    panel.form.sync_focus()
    assert panel.process_keyboard(KeyEvent(ESC), Context()) is LoopEvent.REFRESH
    assert panel.form.selected_index is None


def test_focus_blur_and_border_color():
    config = make_config()
    panel = TombConfiguration(config)
    panel.focus()
    assert panel.focused is True
    assert panel.border_color() == ui.color_light(config)
    panel.blur()
    assert panel.focused is False
    assert panel.border_color() == ui.color_default(config)


def test_tab_index():
    assert TombConfiguration(make_config()).tab_index == 0