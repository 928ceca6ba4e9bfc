from simpleui.host import InputType
from simpleui.layout import Dim2, Vec2
from simpleui.window import window_node_name


def drag(host, start, end):
    host.pointer_down(*start)
    host.pointer_move(*end)
    host.pointer_up(*end)


def test_default_geometry(host, window):
    assert window.position == Vec2(380, 180)
    assert host.get_property(window.container, "absolute_size") == Vec2(520, 360)
    assert host.get_property(window.container, "name") == "Test_Window_Window"
    assert host.get_property(window.title_label, "text") == "Test Window"


def test_window_node_name():
    assert window_node_name("My  Cool\tTool") == "My_Cool_Tool_Window"


def test_titlebar_drag_moves_window(host, window):
    host.pointer_down(500, 190)
    assert window.dragging

    host.pointer_move(600.4, 300.6)
    assert window.position == Vec2(480, 291)

    host.pointer_up(600.4, 300.6)
    assert not window.dragging

    host.pointer_move(700, 400)
    assert window.position == Vec2(480, 291)


def test_other_button_does_not_end_drag(host, window):
    host.pointer_down(500, 190)
    host.pointer_down(50, 50, InputType.MOUSE_BUTTON2)
    host.pointer_up(50, 50, InputType.MOUSE_BUTTON2)
    assert window.dragging

    host.pointer_move(520, 210)
    host.pointer_up(520, 210)
    assert not window.dragging
    assert window.position == Vec2(400, 200)

    host.pointer_move(700, 400)
    assert window.position == Vec2(400, 200)


def test_secondary_press_does_not_drag(host, window):
    host.pointer_down(500, 190, InputType.MOUSE_BUTTON2)
    assert not window.dragging
    host.pointer_up(500, 190, InputType.MOUSE_BUTTON2)


def test_drag_stays_on_screen(host, window):
    host.pointer_down(500, 190)
    for x, y in [(-400, -400), (5000, 5000), (100, 9000)]:
        host.pointer_move(x, y)
        pos = window.position
        assert 0 <= pos.x <= 1280 - 520
        assert 0 <= pos.y <= 720 - 360
    host.pointer_up(100, 9000)


def test_pressing_outside_titlebar_does_not_drag(host, window):
    section = window.add_section("Body")
    c = host.center_of(section.node)
    host.pointer_down(c.x, c.y)
    assert not window.dragging
    host.pointer_up(0, 0)


def test_two_windows_drag_independently(host, ui, window):
    other = ui.create_window(title="Other", size=Dim2.offset(200, 100), position=Dim2.offset(0, 0))

    drag(host, (500, 190), (520, 210))

    assert window.position == Vec2(400, 200)
    assert other.position == Vec2(0, 0)
    assert not other.dragging


def test_close_button_destroys_window(host, ui, window):
    assert host.global_connection_count() == 1

    host.click_node(window.close_button)

    assert window.closed
    assert not host.is_alive(window.container)
    assert ui.windows == []
    assert host.global_connection_count() == 0


def test_close_is_idempotent(host, ui, window):
    window.close()
    window.close()
    assert window.closed
    assert ui.windows == []


def test_minimize_round_trip(host, window):
    first = window.add_section("First")
    second = window.add_section("Second")
    host.set_property(second.node, "visible", False)

    host.click_node(window.minimize_button)
    assert window.minimized
    assert window.size == Dim2(0, 520, 0, 44)
    assert not host.get_property(first.node, "visible")

    host.click_node(window.minimize_button)
    assert not window.minimized
    assert window.size == Dim2.offset(520, 360)
    assert host.get_property(first.node, "visible") is True
    assert host.get_property(second.node, "visible") is False


def test_section_added_while_minimized(host, window):
    window.toggle_minimize()
    late = window.add_section("Late")
    assert not host.get_property(late.node, "visible")

    window.toggle_minimize()
    assert host.get_property(late.node, "visible") is True


def test_minimize_uses_latest_size(host, window):
    host.set_property(window.container, "size", Dim2.offset(400, 300))
    window.toggle_minimize()
    assert window.size == Dim2(0, 400, 0, 44)
    window.toggle_minimize()
    assert window.size == Dim2.offset(400, 300)


def test_sections_stack_in_body(host, window):
    first = window.add_section("First")
    second = window.add_section("Second")

    assert host.get_property(first.node, "absolute_position") == Vec2(390, 224)
    assert host.get_property(second.node, "absolute_position") == Vec2(390, 312)
    assert window.sections == [first, second]


def test_library_destroy_closes_windows(host, ui, window):
    window.add_section("Main").add_slider("Volume")
    assert host.global_connection_count() == 2

    ui.destroy()

    assert window.closed
    assert host.global_connection_count() == 0
