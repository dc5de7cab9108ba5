"""Model and map readers, geometry helpers, sound logic and reverb filters for a BSP map renderer."""

__version__ = "0.1.0"