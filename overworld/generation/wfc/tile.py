"""
Tile declarations for Wave Function Collapse.

A TileVariant is one letter of the tile alphabet. For each direction it
lists the socket labels it exposes on that side, each with a weight.
Two variants may sit side by side when the sockets facing each other share
at least one label. The CompatibilityMatrix is derived once from these
declarations and drives all constraint propagation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Iterable, Iterator, Mapping, Sequence

SocketList = tuple[tuple[Hashable, float], ...]


class TileSetError(ValueError):
    """A tile declaration or tile set is malformed."""


class Direction(Enum):
    """
    Cardinal directions for adjacency rules, in grid coordinates (y grows south).

    The opposite() method is crucial for propagation:
    tile A's NORTH sockets are matched against tile B's SOUTH sockets.
    """
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    def opposite(self) -> "Direction":
        """Return the opposite direction."""
        return _OPPOSITES[self]

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def _as_sockets(entries: Iterable[tuple[Hashable, float]]) -> SocketList:
    return tuple((label, weight) for label, weight in entries)


@dataclass(frozen=True)
class TileVariant:
    """
    A tile type that can appear in the solved grid.

    Attributes:
        id: Unique identifier for this tile type (e.g., "grass", "rose")
        sockets: For each direction, the (label, weight) pairs exposed on that side.
                 Weights are carried as data only; selection is currently uniform.
        color: RGBA tuple for diagnostics rendering
    """
    id: str
    sockets: Mapping[Direction, SocketList] = field(default_factory=dict, hash=False)
    color: tuple[int, int, int, int] = (128, 128, 128, 255)

    def __post_init__(self):
        normalized = {
            direction: _as_sockets(self.sockets.get(direction, ()))
            for direction in Direction
        }
        object.__setattr__(self, "sockets", normalized)

    @classmethod
    def symmetric(
        cls,
        id: str,
        vertical: Sequence[tuple[Hashable, float]] = (),
        horizontal: Sequence[tuple[Hashable, float]] = (),
        color: tuple[int, int, int, int] = (128, 128, 128, 255),
    ) -> "TileVariant":
        """Declare a variant whose north/south and east/west sides match."""
        vertical = _as_sockets(vertical)
        horizontal = _as_sockets(horizontal)
        return cls(
            id=id,
            sockets={
                Direction.NORTH: vertical,
                Direction.SOUTH: vertical,
                Direction.EAST: horizontal,
                Direction.WEST: horizontal,
            },
            color=color,
        )

    def labels(self, direction: Direction) -> frozenset[Hashable]:
        """Socket labels exposed on one side."""
        return frozenset(label for label, _ in self.sockets[direction])

    def weights(self, direction: Direction) -> dict[Hashable, float]:
        """Declared socket weights on one side."""
        return {label: weight for label, weight in self.sockets[direction]}


class CompatibilityMatrix:
    """
    compat[dir][i][j] is True iff variant i may have variant j on its `dir` side.

    Also keeps, per direction and variant id, the frozenset of neighbor ids
    allowed on that side, which is what propagation consumes.
    """

    def __init__(self, variants: Sequence[TileVariant]):
        self.ids: tuple[str, ...] = tuple(v.id for v in variants)
        self.index: dict[str, int] = {tile_id: i for i, tile_id in enumerate(self.ids)}

        self.compat: dict[Direction, list[list[bool]]] = {}
        self._allowed: dict[Direction, dict[str, frozenset[str]]] = {}

        for direction in Direction:
            opposite = direction.opposite()
            table = [
                [bool(vi.labels(direction) & vj.labels(opposite)) for vj in variants]
                for vi in variants
            ]
            self.compat[direction] = table
            self._allowed[direction] = {
                vi.id: frozenset(
                    self.ids[j] for j, ok in enumerate(table[i]) if ok
                )
                for i, vi in enumerate(variants)
            }

    def compatible(self, direction: Direction, tile_a: str, tile_b: str) -> bool:
        """Whether tile_b may sit on tile_a's `direction` side."""
        return self.compat[direction][self.index[tile_a]][self.index[tile_b]]

    def allowed(self, direction: Direction, tile_id: str) -> frozenset[str]:
        """All tile ids allowed on tile_id's `direction` side."""
        return self._allowed[direction][tile_id]


class TileSet:
    """
    Ordered registry of tile variants.

    Registration order is the enumeration order used wherever the solver
    needs a deterministic ordering of candidates.

    Usage:
        tiles = TileSet()
        tiles.register(TileVariant.symmetric("grass", vertical=[("g", 1)], horizontal=[("g", 1)]))
        matrix = tiles.compatibility()
    """

    def __init__(self, variants: Iterable[TileVariant] = ()):
        self._variants: dict[str, TileVariant] = {}
        self._matrix: CompatibilityMatrix | None = None
        for variant in variants:
            self.register(variant)

    def register(self, variant: TileVariant) -> TileVariant:
        """Add a variant. Raises TileSetError on a duplicate id or negative weight."""
        if variant.id in self._variants:
            raise TileSetError(f"Duplicate tile id: {variant.id!r}")
        for direction in Direction:
            for label, weight in variant.sockets[direction]:
                if weight < 0:
                    raise TileSetError(
                        f"Tile {variant.id!r} has negative weight {weight} "
                        f"for socket {label!r} ({direction.name})"
                    )
        self._variants[variant.id] = variant
        self._matrix = None
        return variant

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[TileVariant]:
        return iter(self._variants.values())

    def __contains__(self, tile_id: object) -> bool:
        return tile_id in self._variants

    def __getitem__(self, tile_id: str) -> TileVariant:
        try:
            return self._variants[tile_id]
        except KeyError:
            raise TileSetError(f"Unknown tile id: {tile_id!r}") from None

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._variants)

    def validate(self) -> None:
        """Fail fast on tile sets that cannot be solved by construction."""
        if not self._variants:
            raise TileSetError("Tile set is empty")
        for variant in self._variants.values():
            if all(not variant.sockets[d] for d in Direction):
                raise TileSetError(f"Tile {variant.id!r} declares no sockets on any side")

    def compatibility(self) -> CompatibilityMatrix:
        """Validate and build (once) the compatibility matrix."""
        if self._matrix is None:
            self.validate()
            self._matrix = CompatibilityMatrix(list(self._variants.values()))
        return self._matrix
