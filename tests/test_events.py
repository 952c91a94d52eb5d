from tombkeeper.events import Context, KeyEvent, match_route


def test_goto_and_goback_round_trip():
    context = Context()
    context.goto("/help")
    assert context.location == "/help"
    context.goto("/about")
    context.goback()
    assert context.location == "/help"
    context.goback()
    assert context.location == "/"


def test_goback_without_history_keeps_location():
    context = Context(location="/config")
    context.goback()
    assert context.location == "/config"


def test_match_static_route():
    assert match_route("/help", "/help") == {}
    assert match_route("/", "/") == {}
    assert match_route("/help", "/about") is None


def test_match_route_with_param():
    assert match_route("/delete/:key", "/delete/work") == {"key": "work"}


def test_match_route_length_mismatch():
    assert match_route("/delete/:key", "/delete") is None
    assert match_route("/", "/help") is None


def test_key_event_equality():
    assert KeyEvent("q", ctrl=True) == KeyEvent("q", ctrl=True)
    assert KeyEvent("q", ctrl=True) != KeyEvent("q")