"""Vector, matrix, quaternion and transform math, colours, bounding volumes,
clip-space triangle clipping and an in-memory framebuffer renderer."""

__version__ = "0.1.0"