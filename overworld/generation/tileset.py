"""
Meadow tileset for Wave Function Collapse.

Defines 4 ground-cover tiles. Grass is the hub: it exposes grass, rose and
dandelion sockets, so flowers can only appear next to grass or next to
their own kind. Trees expose a grass socket and cluster with each other.

    rose <-> grass <-> dandelion
               |
              tree
"""

from enum import Enum

from .wfc import TileSet, TileVariant


class SocketType(Enum):
    """Socket labels exposed by meadow tiles."""
    GRASS = "grass"
    ROSE = "rose"
    DANDELION = "dandelion"
    TREE = "tree"


GRASS_COLOR = (34, 139, 34, 255)       # Forest green
ROSE_COLOR = (220, 20, 60, 255)        # Crimson
DANDELION_COLOR = (255, 215, 0, 255)   # Gold
TREE_COLOR = (0, 100, 0, 255)          # Dark green


def create_meadow_tileset() -> TileSet:
    """
    Create the meadow tileset with all socket declarations.

    Every tile is symmetric: north/south sockets equal east/west sockets.
    Weights are kept as declared but do not bias selection.
    """
    grass_sockets = [
        (SocketType.GRASS, 95),
        (SocketType.ROSE, 2),
        (SocketType.DANDELION, 3),
    ]
    tree_sockets = [
        (SocketType.TREE, 5),
        (SocketType.GRASS, 2),
    ]

    return TileSet([
        TileVariant.symmetric(
            "grass",
            vertical=grass_sockets,
            horizontal=grass_sockets,
            color=GRASS_COLOR,
        ),
        TileVariant.symmetric(
            "rose",
            vertical=[(SocketType.ROSE, 2)],
            horizontal=[(SocketType.ROSE, 2)],
            color=ROSE_COLOR,
        ),
        TileVariant.symmetric(
            "dandelion",
            vertical=[(SocketType.DANDELION, 5)],
            horizontal=[(SocketType.DANDELION, 5)],
            color=DANDELION_COLOR,
        ),
        TileVariant.symmetric(
            "tree",
            vertical=tree_sockets,
            horizontal=tree_sockets,
            color=TREE_COLOR,
        ),
    ])


# Quick reference for the adjacency graph:
#
# grass:     [grass, rose, dandelion, tree]
# rose:      [grass, rose]
# dandelion: [grass, dandelion]
# tree:      [grass, tree]
