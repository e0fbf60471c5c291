"""RollShutter Generators: end-to-end image generation."""

from .shutter_generator import ShutterGenerator

__all__ = ["ShutterGenerator"]
