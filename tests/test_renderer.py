from unittest.mock import MagicMock

from simpleui.draw import DrawContext
from simpleui.layout import Rect
from simpleui.renderer import MIN_CAPACITY, SimpleUIRenderer


def make_batch(quads: int = 1, lines: int = 0):
    ctx = DrawContext(800, 600)
    for i in range(quads):
        ctx.draw_rect(Rect(i, i, 10, 10), (1, 1, 1, 1))
    for i in range(lines):
        ctx.draw_line(0, i, 10, i, (1, 1, 1, 1))
    return ctx.finalize()


def test_render_uploads_quads():
    gl = MagicMock()
    renderer = SimpleUIRenderer(gl)

    renderer.render(make_batch(2), 800, 600)

    assert gl.program.call_count == 2
    gl.buffer.assert_called_once_with(reserve=MIN_CAPACITY * 11 * 4, dynamic=True)
    vao = gl.vertex_array.return_value
    vao.render.assert_called_once_with(mode=gl.TRIANGLES, vertices=12)
    gl.buffer.return_value.write.assert_called_once()


def test_empty_batch_allocates_nothing():
    gl = MagicMock()
    renderer = SimpleUIRenderer(gl)
    renderer.render(make_batch(0), 800, 600)
    gl.buffer.assert_not_called()


def test_text_only_batch_draws_nothing():
    ctx = DrawContext(800, 600)
    ctx.draw_text_in_rect("Hello", Rect(10, 10, 100, 20), (1, 1, 1, 1))
    batch = ctx.finalize()
    assert len(batch.texts) == 1

    gl = MagicMock()
    SimpleUIRenderer(gl).render(batch, 800, 600)

    gl.buffer.assert_not_called()
    gl.vertex_array.return_value.render.assert_not_called()


def test_buffers_are_reused_and_grown():
    gl = MagicMock()
    renderer = SimpleUIRenderer(gl)

    renderer.render(make_batch(2), 800, 600)
    renderer.render(make_batch(3), 800, 600)
    assert gl.buffer.call_count == 1

    renderer.render(make_batch(100), 800, 600)
    assert gl.buffer.call_count == 2
    assert gl.program.call_count == 2


def test_lines_and_release():
    gl = MagicMock()
    renderer = SimpleUIRenderer(gl)
    renderer.render(make_batch(0, lines=3), 800, 600)

    vao = gl.vertex_array.return_value
    vao.render.assert_called_once_with(mode=gl.LINES, vertices=6)

    renderer.release()
    assert gl.buffer.return_value.release.called
    assert gl.program.return_value.release.called
