"""tinytown - a small click-to-move people simulation.

People wander a 2D canvas when selected and directed, stopping short of
each other. The "town" scenario adds buildings joined by roads on a grid.
"""

__version__ = "0.1.0"
