"""A tile game: collect every item on a walled map, then reach the exit.

Modules: reader (chunked line reading), mapfile (map validation), game
(game state and moves) and display (pygame window and the solong command).
"""

__version__ = "0.1.0"