"""Core pieces of a small game engine: input, output, debugging, mesh data, images, materials and assets."""

__version__ = "0.1.0"

__all__ = [
    "assets",
    "debug",
    "glfw_input",
    "image",
    "keyboard",
    "keycodes",
    "material",
    "meshdata",
    "mouse",
    "output",
]