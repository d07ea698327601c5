"""Grid-map raycasting with map validation, in-memory images, named colours and a headless event loop."""

__version__ = "0.1.0"