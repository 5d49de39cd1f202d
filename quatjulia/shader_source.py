import os

SHADER_DIR = os.path.join(os.path.dirname(__file__), "shaders")

SHADER_FILES = ("vertex_shader.glsl", "fragment_shader.glsl", "display_shader.glsl")


class RendererUnavailable(RuntimeError):
    """The GL backend could not be set up. Fatal to the explorer."""


def load_shader_code(file_path):
    """
    Load shader code from a file and return it as a string.

    Args:
        file_path (str): Path to the shader code file.
    Returns:
        str: Contents of the shader code file.
    Raises:
        FileNotFoundError: If the shader file cannot be found.
        IOError: If the shader file cannot be read.
    """
    try:
        with open(file_path, 'r') as file:
            return file.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Shader file not found: {file_path}")
    except IOError as e:
        raise IOError(f"Error reading shader file {file_path}: {e}")


def load_shader_sources(shader_dir=SHADER_DIR):
    """Return (vertex, fragment, display) sources, or raise RendererUnavailable."""
    try:
        return tuple(load_shader_code(os.path.join(shader_dir, name)) for name in SHADER_FILES)
    except (FileNotFoundError, IOError) as e:
        raise RendererUnavailable(str(e)) from e
