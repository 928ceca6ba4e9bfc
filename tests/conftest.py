import pytest

from simpleui.library import SimpleUI
from simpleui.nodes import NodeFactory
from simpleui.retained import RetainedHost


@pytest.fixture
def host():
    return RetainedHost(1280, 720)


@pytest.fixture
def factory(host):
    return NodeFactory(host)


@pytest.fixture
def ui(host):
    lib = SimpleUI.create("Test", host)
    yield lib
    lib.destroy()


@pytest.fixture
def window(ui):
    return ui.create_window(title="Test Window")


@pytest.fixture
def section(window):
    return window.add_section("Main")
