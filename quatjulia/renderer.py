import ctypes
import logging

from OpenGL.GL import *
from OpenGL.GL.shaders import compileProgram, compileShader
from OpenGL.error import GLError

from .shader_source import SHADER_DIR, RendererUnavailable, load_shader_sources

logger = logging.getLogger(__name__)

UNIFORMS = [
    'u_aspectRatio', 'u_pixelSize', 'u_pos', 'u_forward', 'u_up', 'u_right', 'u_fov',
    'u_julia', 'u_iterations', 'u_time',
    'u_altColor', 'u_altColorIntensity', 'u_sphereShrink',
]


class ShaderRenderer:
    """
    Full-screen ray-marching quad drawn through PyOpenGL.

    The fractal is rendered into an offscreen texture at canvas resolution
    (window size times resolution scale) and then stretched over the window
    by a small display shader.
    """

    def __init__(self, shader_dir=SHADER_DIR):
        vertex_shader, fragment_shader, display_fragment_shader = load_shader_sources(shader_dir)

        try:
            logger.info("OpenGL %s on %s", _gl_string(GL_VERSION), _gl_string(GL_RENDERER))
            self.program = compileProgram(
                compileShader(vertex_shader, GL_VERTEX_SHADER),
                compileShader(fragment_shader, GL_FRAGMENT_SHADER)
            )
            self.display_program = compileProgram(
                compileShader(vertex_shader, GL_VERTEX_SHADER),
                compileShader(display_fragment_shader, GL_FRAGMENT_SHADER)
            )
        except (RuntimeError, GLError) as e:
            raise RendererUnavailable(f"Shader compilation error: {e}") from e

        self.uniform_locs = self.get_uniform_locations(self.program)
        missing = [name for name, loc in self.uniform_locs.items() if loc == -1]
        if missing:
            # The compiler drops uniforms the shader never reads
            logger.debug("Inactive uniforms: %s", ", ".join(missing))

        # --- Quad VAO/VBO ---
        quad_vertices = [
            # positions   # tex coords
            -1.0, -1.0,  0.0, 0.0,
             1.0, -1.0,  1.0, 0.0,
             1.0,  1.0,  1.0, 1.0,
            -1.0,  1.0,  0.0, 1.0
        ]
        quad_vertices = (GLfloat * len(quad_vertices))(*quad_vertices)
        self.vao = glGenVertexArrays(1)
        glBindVertexArray(self.vao)
        self.vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, self.vbo)
        glBufferData(GL_ARRAY_BUFFER, len(quad_vertices) * 4, quad_vertices, GL_STATIC_DRAW)
        glVertexAttribPointer(0, 2, GL_FLOAT, GL_FALSE, 4 * 4, None)  # position
        glEnableVertexAttribArray(0)
        glVertexAttribPointer(1, 2, GL_FLOAT, GL_FALSE, 4 * 4, ctypes.c_void_p(2 * 4))  # tex coord
        glEnableVertexAttribArray(1)
        glBindVertexArray(0)

        self.fbo = None
        self.render_texture = None
        self.fbo_width = 0
        self.fbo_height = 0
        self.window_width = 0
        self.window_height = 0

        glUseProgram(self.program)

    def get_uniform_locations(self, shader_program):
        return {name: glGetUniformLocation(shader_program, name) for name in UNIFORMS}

    def setup_framebuffer(self, width, height):
        """Create or update the framebuffer for rendering at scaled resolution."""
        if self.fbo is not None and self.fbo_width == width and self.fbo_height == height:
            return

        if self.fbo is not None:
            glDeleteFramebuffers(1, [self.fbo])
            glDeleteTextures(1, [self.render_texture])

        self.fbo = glGenFramebuffers(1)
        glBindFramebuffer(GL_FRAMEBUFFER, self.fbo)

        self.render_texture = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, self.render_texture)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGB, width, height, 0, GL_RGB, GL_UNSIGNED_BYTE, None)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glFramebufferTexture2D(GL_FRAMEBUFFER, GL_COLOR_ATTACHMENT0, GL_TEXTURE_2D, self.render_texture, 0)

        if glCheckFramebufferStatus(GL_FRAMEBUFFER) != GL_FRAMEBUFFER_COMPLETE:
            glBindFramebuffer(GL_FRAMEBUFFER, 0)
            raise RendererUnavailable("Framebuffer is not complete")

        self.fbo_width = width
        self.fbo_height = height
        glBindFramebuffer(GL_FRAMEBUFFER, 0)

    def resize(self, canvas_width, canvas_height, window_width, window_height):
        self.window_width = window_width
        self.window_height = window_height
        self.setup_framebuffer(canvas_width, canvas_height)

    # --- Uniform setters ---
    # The fractal program stays bound between frames so these apply directly.

    def set_aspect_ratio(self, aspect_ratio):
        glUniform1f(self.uniform_locs['u_aspectRatio'], aspect_ratio)

    def set_pixel_size(self, pixel_size):
        glUniform2f(self.uniform_locs['u_pixelSize'], pixel_size[0], pixel_size[1])

    def set_camera(self, position, forward, right, up, fov):
        locs = self.uniform_locs
        glUniform3f(locs['u_pos'], *map(float, position))
        glUniform3f(locs['u_forward'], *map(float, forward))
        glUniform3f(locs['u_right'], *map(float, right))
        glUniform3f(locs['u_up'], *map(float, up))
        glUniform1f(locs['u_fov'], fov)

    def set_julia(self, julia):
        glUniform3f(self.uniform_locs['u_julia'], *map(float, julia))

    def set_time(self, seconds):
        glUniform1f(self.uniform_locs['u_time'], seconds)

    def set_iterations(self, iterations):
        glUniform1i(self.uniform_locs['u_iterations'], iterations)

    def set_alt_color(self, value):
        glUniform1f(self.uniform_locs['u_altColor'], value)

    def set_alt_color_intensity(self, value):
        glUniform1f(self.uniform_locs['u_altColorIntensity'], value)

    def set_sphere_shrink(self, value):
        glUniform1f(self.uniform_locs['u_sphereShrink'], value)

    # --- Drawing ---

    def draw(self):
        glBindVertexArray(self.vao)

        glBindFramebuffer(GL_FRAMEBUFFER, self.fbo)
        glViewport(0, 0, self.fbo_width, self.fbo_height)
        glDrawArrays(GL_TRIANGLE_FAN, 0, 4)
        glBindFramebuffer(GL_FRAMEBUFFER, 0)

        # Display the scaled render over the whole window
        glViewport(0, 0, self.window_width, self.window_height)
        glUseProgram(self.display_program)
        glActiveTexture(GL_TEXTURE0)
        glBindTexture(GL_TEXTURE_2D, self.render_texture)
        glUniform1i(glGetUniformLocation(self.display_program, "renderTexture"), 0)
        glDrawArrays(GL_TRIANGLE_FAN, 0, 4)

        glBindVertexArray(0)
        glUseProgram(self.program)

    def release(self):
        if self.fbo is not None:
            glDeleteFramebuffers(1, [self.fbo])
            self.fbo = None
        if self.render_texture is not None:
            glDeleteTextures(1, [self.render_texture])
            self.render_texture = None
        glDeleteVertexArrays(1, [self.vao])
        glDeleteBuffers(1, [self.vbo])
        glDeleteProgram(self.display_program)
        glDeleteProgram(self.program)
        logger.info("Renderer released")


def _gl_string(name):
    value = glGetString(name)
    return value.decode() if value else "unknown"
