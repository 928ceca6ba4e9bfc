import logging

from simpleui.app import SimpleUIDemoApp
from simpleui.retained import RetainedHost


def make_app():
    # Skip the GL window; only the UI wiring is exercised
    app = SimpleUIDemoApp.__new__(SimpleUIDemoApp)
    app.host = RetainedHost(1280, 720)
    app._setup_ui()
    return app


def test_demo_ui_builds():
    app = make_app()
    (window,) = app.ui.windows
    assert [s.name for s in window.sections] == ["Audio", "Actions"]
    assert app.is_muted() is False
    app.ui.destroy()


def test_demo_callbacks_update_status():
    app = make_app()
    app._on_submit("Ada")
    assert app.status.text == "Hello, Ada"

    app._on_scan()
    assert app.status.text.endswith("0 errors")
    app.ui.destroy()


def test_mouse_events_reach_host():
    app = make_app()
    mute = app.mute
    c = app.host.center_of(mute.box)

    app.on_mouse_press_event(c.x, c.y, 1)
    app.on_mouse_release_event(c.x, c.y, 1)

    assert app.is_muted() is True
    app.ui.destroy()


def test_demo_status_is_logged(caplog):
    app = make_app()
    with caplog.at_level(logging.INFO, logger="simpleui.app"):
        app._on_submit("Ada")
    assert "Hello, Ada" in caplog.text
    app.ui.destroy()
