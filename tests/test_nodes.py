import logging

import pytest

from simpleui.host import HostError
from simpleui.layout import Dim2, Vec2
from simpleui.nodes import (
    NodeFactory, PropertyError,
    FRAME, TEXT_LABEL, SCREEN_GUI, LIST_LAYOUT,
)


def test_create_applies_properties_and_parent(host, factory):
    root = factory.create(SCREEN_GUI, {"name": "Root"}, parent=host.user_surface())
    frame = factory.create(FRAME, {
        "name": "Box",
        "size": Dim2.offset(100, 50),
        "position": Dim2.offset(10, 20),
    }, parent=root)

    assert host.parent_of(frame) is root
    assert host.get_property(frame, "size") == Dim2.offset(100, 50)
    assert host.get_property(frame, "absolute_position") == Vec2(10, 20)
    assert host.get_property(frame, "absolute_size") == Vec2(100, 50)
    assert host.full_name(frame) == "PlayerGui.Root.Box"


def test_strict_factory_rejects_bad_values(factory):
    with pytest.raises(PropertyError):
        factory.create(FRAME, {"size": (100, 50)})
    with pytest.raises(PropertyError):
        factory.create(FRAME, {"no_such_property": 1})
    with pytest.raises(PropertyError):
        factory.create(FRAME, {"absolute_size": Vec2(1, 1)})
    with pytest.raises(PropertyError):
        factory.create(FRAME, {"visible": None})


def test_unknown_kind(factory):
    with pytest.raises(HostError):
        factory.create("Sprite")


def test_lenient_factory_skips_bad_properties(host, caplog):
    caplog.set_level(logging.DEBUG, logger="simpleui")
    factory = NodeFactory(host, lenient=True)

    frame = factory.create(FRAME, {
        "size": Dim2.offset(5, 5),
        "bogus": 1,
        "visible": "yes",
    })

    assert host.get_property(frame, "size") == Dim2.offset(5, 5)
    assert host.get_property(frame, "visible") is True
    assert "Skipped Frame.bogus" in caplog.text


def test_read_only_and_destroyed(host, factory):
    frame = factory.create(FRAME, {"size": Dim2.offset(5, 5)})
    with pytest.raises(HostError):
        host.set_property(frame, "absolute_size", Vec2(1, 1))

    host.destroy_node(frame)
    assert not host.is_alive(frame)
    with pytest.raises(HostError):
        host.set_property(frame, "visible", False)


def test_parent_cycle_rejected(host, factory):
    outer = factory.create(FRAME)
    inner = factory.create(FRAME, parent=outer)
    with pytest.raises(HostError):
        host.set_parent(outer, inner)


def test_destroy_cascades(host, factory):
    outer = factory.create(FRAME)
    inner = factory.create(FRAME, parent=outer)
    seen = []
    host.subscribe(inner, "destroying", lambda: seen.append("inner"))

    host.destroy_node(outer)

    assert seen == ["inner"]
    assert not host.is_alive(inner)


def test_list_layout_stacks_visible_children(host, factory):
    root = factory.create(SCREEN_GUI, parent=host.user_surface())
    column = factory.create(FRAME, {"size": Dim2.offset(100, 200)}, parent=root)
    factory.create(LIST_LAYOUT, {"padding": 4}, parent=column)
    a = factory.create(FRAME, {"size": Dim2(1, 0, 0, 20), "layout_order": 2}, parent=column)
    b = factory.create(FRAME, {"size": Dim2(1, 0, 0, 30), "layout_order": 1}, parent=column)
    c = factory.create(FRAME, {"size": Dim2(1, 0, 0, 10), "layout_order": 3}, parent=column)

    assert host.get_property(b, "absolute_position") == Vec2(0, 0)
    assert host.get_property(a, "absolute_position") == Vec2(0, 34)
    assert host.get_property(c, "absolute_position") == Vec2(0, 58)

    host.set_property(a, "visible", False)
    assert host.get_property(c, "absolute_position") == Vec2(0, 34)


def test_text_fits(host, factory):
    root = factory.create(SCREEN_GUI, parent=host.user_surface())
    short = factory.create(TEXT_LABEL, {
        "size": Dim2.offset(200, 20),
        "text": "ok",
    }, parent=root)
    long = factory.create(TEXT_LABEL, {
        "size": Dim2.offset(20, 20),
        "text": "much too long for the box",
    }, parent=root)

    assert host.get_property(short, "text_fits") is True
    assert host.get_property(long, "text_fits") is False
