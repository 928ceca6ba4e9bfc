"""
GL Renderer

Uploads a DrawBatch through moderngl. Owns its shaders and buffers;
buffers grow on demand and are reused between frames.

Only quads and lines are drawn. DrawText commands are skipped until a
font atlas is available.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from simpleui.draw import QUAD_VERTEX_FLOATS, LINE_VERTEX_FLOATS

if TYPE_CHECKING:
    import moderngl
    from simpleui.draw import DrawBatch


QUAD_VERTEX_SHADER = """
#version 330
in vec2 in_pos;
in vec2 in_uv;
in vec4 in_color;
in vec2 in_size;
in float in_radius;

out vec2 v_local;
out vec4 v_color;
out vec2 v_size;
out float v_radius;

uniform vec2 u_screen_size;

void main() {
    vec2 ndc = (in_pos / u_screen_size) * 2.0 - 1.0;
    ndc.y = -ndc.y;
    gl_Position = vec4(ndc, 0.0, 1.0);
    v_local = in_uv * in_size;
    v_color = in_color;
    v_size = in_size;
    v_radius = in_radius;
}
"""

QUAD_FRAGMENT_SHADER = """
#version 330
in vec2 v_local;
in vec4 v_color;
in vec2 v_size;
in float v_radius;
out vec4 frag_color;

void main() {
    float alpha = v_color.a;
    if (v_radius > 0.0) {
        // Rounded-rect distance, anti-aliased over one pixel
        vec2 half_size = v_size * 0.5;
        vec2 q = abs(v_local - half_size) - (half_size - vec2(v_radius));
        float d = length(max(q, 0.0)) + min(max(q.x, q.y), 0.0) - v_radius;
        alpha *= clamp(0.5 - d, 0.0, 1.0);
    }
    frag_color = vec4(v_color.rgb, alpha);
}
"""

LINE_VERTEX_SHADER = """
#version 330
in vec2 in_pos;
in vec4 in_color;
out vec4 v_color;
uniform vec2 u_screen_size;

void main() {
    vec2 ndc = (in_pos / u_screen_size) * 2.0 - 1.0;
    ndc.y = -ndc.y;
    gl_Position = vec4(ndc, 0.0, 1.0);
    v_color = in_color;
}
"""

LINE_FRAGMENT_SHADER = """
#version 330
in vec4 v_color;
out vec4 frag_color;
void main() { frag_color = v_color; }
"""

MIN_CAPACITY = 256


class SimpleUIRenderer:
    """
    Renders DrawBatch to the bound framebuffer.

    Usage:
        renderer = SimpleUIRenderer(ctx)

        # Each frame:
        batch = paint_roots(host, host.surfaces, width, height)
        renderer.render(batch, width, height)
    """

    def __init__(self, ctx: 'moderngl.Context'):
        self.ctx = ctx

        self._quad_prog = None
        self._line_prog = None

        self._quad_vbo = None
        self._quad_vao = None
        self._quad_capacity = 0

        self._line_vbo = None
        self._line_vao = None
        self._line_capacity = 0

        self._initialized = False

    def _ensure_initialized(self):
        """Compile shaders on first use."""
        if self._initialized:
            return
        self._quad_prog = self.ctx.program(
            vertex_shader=QUAD_VERTEX_SHADER,
            fragment_shader=QUAD_FRAGMENT_SHADER,
        )
        self._line_prog = self.ctx.program(
            vertex_shader=LINE_VERTEX_SHADER,
            fragment_shader=LINE_FRAGMENT_SHADER,
        )
        self._initialized = True

    def _ensure_quad_buffer(self, vertex_count: int):
        if self._quad_capacity >= vertex_count and self._quad_vbo is not None:
            return

        new_capacity = max(vertex_count, self._quad_capacity * 2, MIN_CAPACITY)
        if self._quad_vao:
            self._quad_vao.release()
        if self._quad_vbo:
            self._quad_vbo.release()

        self._quad_vbo = self.ctx.buffer(reserve=new_capacity * QUAD_VERTEX_FLOATS * 4, dynamic=True)
        self._quad_capacity = new_capacity
        self._quad_vao = self.ctx.vertex_array(
            self._quad_prog,
            [(self._quad_vbo, "2f 2f 4f 2f 1f", "in_pos", "in_uv", "in_color", "in_size", "in_radius")],
        )

    def _ensure_line_buffer(self, vertex_count: int):
        if self._line_capacity >= vertex_count and self._line_vbo is not None:
            return

        new_capacity = max(vertex_count, self._line_capacity * 2, MIN_CAPACITY)
        if self._line_vao:
            self._line_vao.release()
        if self._line_vbo:
            self._line_vbo.release()

        self._line_vbo = self.ctx.buffer(reserve=new_capacity * LINE_VERTEX_FLOATS * 4, dynamic=True)
        self._line_capacity = new_capacity
        self._line_vao = self.ctx.vertex_array(
            self._line_prog,
            [(self._line_vbo, "2f 4f", "in_pos", "in_color")],
        )

    def render(self, batch: 'DrawBatch', screen_width: int, screen_height: int):
        """
        Render a DrawBatch.

        Text commands are not drawn here; they need a font atlas.
        """
        self._ensure_initialized()
        self.ctx.enable(self.ctx.BLEND)

        if batch.quads:
            vertices = batch.quad_vertices()
            self._ensure_quad_buffer(len(vertices))
            self._quad_vbo.write(vertices.tobytes())
            self._quad_prog["u_screen_size"].value = (screen_width, screen_height)
            self._quad_vao.render(mode=self.ctx.TRIANGLES, vertices=len(vertices))

        if batch.lines:
            vertices = batch.line_vertices()
            self._ensure_line_buffer(len(vertices))
            self._line_vbo.write(vertices.tobytes())
            self._line_prog["u_screen_size"].value = (screen_width, screen_height)
            self._line_vao.render(mode=self.ctx.LINES, vertices=len(vertices))

    def release(self):
        """Release GPU resources."""
        for resource in (
            self._quad_vao, self._quad_vbo,
            self._line_vao, self._line_vbo,
            self._quad_prog, self._line_prog,
        ):
            if resource:
                resource.release()
        self._quad_vao = self._quad_vbo = None
        self._line_vao = self._line_vbo = None
        self._quad_prog = self._line_prog = None
        self._quad_capacity = self._line_capacity = 0
        self._initialized = False
