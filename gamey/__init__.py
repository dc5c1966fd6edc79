"""
GameY - Game of Y engine and bots

Two players alternately claim cells of a triangular board; the first
whose connected group touches all three sides wins. The package provides:
- Coordinate system and move legality
- Incremental win detection (union-find over cells and side anchors)
- Bots: random, greedy heuristic, Monte-Carlo playouts
- Exchange notation, CLI and HTTP API
"""

__version__ = "0.1.0"
