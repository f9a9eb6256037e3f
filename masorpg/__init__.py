"""MasoRPG: a pygame role-playing game, its 2D camera, and the yajuiku build helper."""

__version__ = "0.1.0"
__all__ = ["__version__"]