from tombkeeper.events import BACKSPACE, DOWN, ENTER, ESC, KeyEvent, LoopEvent
from tombkeeper.modal import Modal


def make_modal():
    return Modal("Title", "abc")


def test_new_modal_is_active():
    modal = make_modal()
    assert modal.is_active() is True
    assert modal.title == "Title"
    assert modal.text == "abc"


def test_setters_replace_values():
    modal = make_modal()
    modal.set_title("Other")
    modal.set_text("xyz")
    assert (modal.title, modal.text) == ("Other", "xyz")


def test_write_then_backspace_round_trip():
    modal = make_modal()
    modal.write("d")
    assert modal.text == "abcd"
    modal.backspace()
    assert modal.text == "abc"


def test_backspace_on_empty_text_keeps_it_empty():
    modal = Modal("Title", "")
    modal.backspace()
    assert modal.text == ""


def test_char_key_writes_and_refreshes():
    modal = make_modal()
    assert modal.process_keyboard(KeyEvent("z")) is LoopEvent.REFRESH
    assert modal.text == "abcz"


def test_enter_writes_newline():
    modal = make_modal()
    assert modal.process_keyboard(KeyEvent(ENTER)) is LoopEvent.PROPAGATE
    assert modal.text == "abc\n"


def test_backspace_key_removes_last_char():
    modal = make_modal()
    assert modal.process_keyboard(KeyEvent(BACKSPACE)) is LoopEvent.PROPAGATE
    assert modal.text == "ab"


def test_escape_deactivates():
    modal = make_modal()
    assert modal.process_keyboard(KeyEvent(ESC)) is LoopEvent.PROPAGATE
    assert modal.is_active() is False


def test_other_keys_propagate_without_change():
    modal = make_modal()
    assert modal.process_keyboard(KeyEvent(DOWN)) is LoopEvent.PROPAGATE
    assert modal.text == "abc"
    assert modal.is_active() is True