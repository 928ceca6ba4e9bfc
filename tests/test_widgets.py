import logging

import pytest

from simpleui.host import InputType
from simpleui.layout import Dim2, Vec2
from simpleui.widgets.base import safe_call


# -----------------------------------------------------------------------------
# Section
# -----------------------------------------------------------------------------

def test_section_layout(host, section):
    assert host.get_property(section.content, "absolute_position") == Vec2(396, 254)
    assert section.height == 80


def test_section_grows_to_fit(host, section):
    for i in range(4):
        section.add_button(f"B{i}")
    # 4 buttons of 36 with 6 between, plus title strip and margin
    assert section.height == 4 * 36 + 3 * 6 + 36
    assert len(section.elements) == 4


def test_elements_stack_in_order(host, section):
    first = section.add_button("First")
    second = section.add_label("Second")
    assert host.get_property(first.node, "absolute_position") == Vec2(396, 254)
    assert host.get_property(second.node, "absolute_position") == Vec2(396, 296)


# -----------------------------------------------------------------------------
# Button
# -----------------------------------------------------------------------------

def test_button_click(host, section):
    clicks = []
    button = section.add_button("Go", on_click=lambda: clicks.append(1))

    host.click_node(button.node)
    host.click_node(button.node)

    assert clicks == [1, 1]
    assert button.text == "Go"
    assert host.get_property(button.node, "absolute_size") == Vec2(488, 36)


def test_button_release_elsewhere_does_not_click(host, section):
    clicks = []
    button = section.add_button("Go", on_click=lambda: clicks.append(1))

    c = host.center_of(button.node)
    host.pointer_down(c.x, c.y)
    host.pointer_up(5, 5)

    assert clicks == []


def test_failing_callback_keeps_button_working(host, section, caplog):
    caplog.set_level(logging.DEBUG, logger="simpleui")
    calls = []

    def broken():
        calls.append(1)
        raise RuntimeError("nope")

    button = section.add_button("Bad", on_click=broken)
    host.click_node(button.node)
    host.click_node(button.node)

    assert calls == [1, 1]
    assert button.alive
    assert "raised" in caplog.text


def test_safe_call():
    assert safe_call(None)
    assert safe_call(lambda x: x, 1)
    assert not safe_call(lambda: 1 / 0)


# -----------------------------------------------------------------------------
# Toggle
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("initial", [False, True])
def test_toggle_state_parity(host, section, initial):
    changes = []
    toggle, get_state = section.add_toggle("Mute", initial, on_change=changes.append)
    assert get_state() is initial

    for n in range(1, 6):
        host.click_node(toggle.box)
        assert get_state() == (initial != (n % 2 == 1))
        assert host.get_property(toggle.box, "text") == ("ON" if get_state() else "OFF")

    assert changes == [initial != (n % 2 == 1) for n in range(1, 6)]


def test_toggle_failing_callback_still_flips(host, section):
    def broken(state):
        raise ValueError(state)

    toggle, get_state = section.add_toggle("T", on_change=broken)
    host.click_node(toggle.box)
    assert get_state() is True


# -----------------------------------------------------------------------------
# Slider
# -----------------------------------------------------------------------------

def test_slider_initial_value(section):
    slider = section.add_slider("Volume", 0, 100, 50)
    assert slider.value == 50
    assert slider.fraction == 0.5

    clamped = section.add_slider("Clamped", 0, 10, 50)
    assert clamped.value == 10
    assert clamped.fraction == 1.0

    default = section.add_slider("Default", 3, 9)
    assert default.value == 3


def test_slider_press_and_drag(host, section):
    values = []
    slider = section.add_slider("Volume", 0, 100, 50, on_change=values.append)
    track_pos = host.get_property(slider.track, "absolute_position")
    assert track_pos == Vec2(396, 272)

    # A quarter of the 488px track
    host.pointer_down(396 + 122, 278)
    assert slider.dragging
    assert slider.value == 25
    assert slider.fraction == 0.25
    assert host.get_property(slider.fill, "size") == Dim2(0.25, 0, 1, 0)

    host.pointer_move(10000, 278)
    assert slider.value == 100
    host.pointer_move(-50, 500)
    assert slider.value == 0

    host.pointer_up(-50, 500)
    assert not slider.dragging
    host.pointer_move(396 + 244, 278)
    assert slider.value == 0

    assert values == [25, 100, 0]


def test_slider_values_stay_in_range(host, section):
    slider = section.add_slider("Range", -5, 5, 0)
    host.pointer_down(400, 278)
    for x in (-1000, 0, 396, 500, 884, 2000):
        host.pointer_move(x, 278)
        assert -5 <= slider.value <= 5
        assert 0 <= slider.fraction <= 1
    host.pointer_up(0, 0)


def test_slider_degenerate_range(host, section):
    values = []
    slider = section.add_slider("Fixed", 5, 5, 99, on_change=values.append)
    assert slider.value == 5
    assert slider.fraction == 0

    host.pointer_down(700, 278)
    host.pointer_move(800, 278)
    host.pointer_up(800, 278)

    assert slider.value == 5
    assert slider.fraction == 0
    assert values == [5, 5]


def test_dragging_one_slider_leaves_other(host, section):
    first = section.add_slider("A", 0, 100, 0)
    second = section.add_slider("B", 0, 100, 0)
    assert host.get_property(second.track, "absolute_position") == Vec2(396, 310)

    host.pointer_down(396 + 244, 278)
    host.pointer_move(884, 300)
    host.pointer_up(884, 300)

    assert first.value == 100
    assert second.value == 0


def test_slider_failing_callback_still_updates(host, section):
    def broken(value):
        raise RuntimeError(value)

    slider = section.add_slider("V", 0, 100, 0, on_change=broken)
    host.pointer_down(396 + 244, 278)
    host.pointer_up(396 + 244, 278)
    assert slider.value == 50


# -----------------------------------------------------------------------------
# Textbox
# -----------------------------------------------------------------------------

def test_textbox_submits_on_enter(host, section):
    submitted = []
    box = section.add_textbox("Name", "your name", on_submit=submitted.append)
    assert box.placeholder == "your name"
    assert box.text == ""

    host.click_node(box.box)
    assert host.focused_node is box.box
    host.type_text("hello")
    host.press_key("backspace")
    host.press_key("Enter")

    assert submitted == ["hell"]
    assert host.focused_node is None


def test_textbox_focus_lost_without_enter(host, section):
    submitted = []
    box = section.add_textbox("Name", on_submit=submitted.append)

    host.click_node(box.box)
    host.type_text("abc")
    host.click(5, 5)

    host.click_node(box.box)
    host.press_key("escape")

    assert submitted == []
    assert box.text == "abc"


# -----------------------------------------------------------------------------
# Label
# -----------------------------------------------------------------------------

def test_label_text(host, section):
    label = section.add_label("Ready")
    assert label.text == "Ready"
    label.text = "Done"
    assert host.get_property(label.node, "text") == "Done"


# -----------------------------------------------------------------------------
# Secondary button
# -----------------------------------------------------------------------------

def test_secondary_click_does_not_activate_button(host, section):
    clicks = []
    button = section.add_button("Go", on_click=lambda: clicks.append(1))

    host.click_node(button.node, InputType.MOUSE_BUTTON2)
    assert clicks == []

    host.click_node(button.node)
    assert clicks == [1]


def test_secondary_click_does_not_flip_toggle(host, section):
    toggle, get_state = section.add_toggle("Mute")

    host.click_node(toggle.box, InputType.MOUSE_BUTTON2)

    assert get_state() is False
    assert host.get_property(toggle.box, "text") == "OFF"


def test_secondary_click_does_not_focus_textbox(host, section):
    box = section.add_textbox("Name")

    host.click_node(box.box, InputType.MOUSE_BUTTON2)
    assert host.focused_node is None

    host.click_node(box.box)
    host.click(5, 5, InputType.MOUSE_BUTTON2)
    assert host.focused_node is box.box
