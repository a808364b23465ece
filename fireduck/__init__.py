"""Game rules, menus and screens for a 2D game about a fire-breathing duck and crumbling castles."""

__version__ = "0.1.0"