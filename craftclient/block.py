"""Block types, their collision boxes and the block registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

Vector3 = tuple[float, float, float]

_ORIGIN: Vector3 = (0.0, 0.0, 0.0)


def _add(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vector3 = _ORIGIN
    max: Vector3 = _ORIGIN

    def intersects(self, other: AABB) -> bool:
        """True if the two boxes overlap with a non-zero volume."""
        return all(
            self.max[i] > other.min[i] and self.min[i] < other.max[i] for i in range(3)
        )

    def offset(self, delta: Sequence[float]) -> AABB:
        """Return this box moved by ``delta``."""
        return AABB(_add(self.min, delta), _add(self.max, delta))

    def __add__(self, delta: Sequence[float]) -> AABB:
        return self.offset(delta)


class Block:
    """A block type; ``type`` holds the id shifted left by four plus the meta."""

    def __init__(
        self,
        name: str,
        data: int,
        solid: bool = True,
        bounding_box: AABB | None = None,
    ) -> None:
        self._name = name
        self._data = data
        self.solid = solid
        self.bounding_box = bounding_box if bounding_box is not None else AABB()

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> int:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Block({self._name!r}, {self._data})"

    def is_opaque(self) -> bool:
        return self.bounding_box.min != _ORIGIN or self.bounding_box.max != _ORIGIN

    def get_bounding_box(self, at: Sequence[float] | None = None) -> AABB:
        """Return the box, moved to the block position ``at`` when given."""
        if at is None:
            return self.bounding_box
        block_pos = tuple(float(int(c)) for c in at)
        return self.bounding_box.offset(block_pos)

    def collides_with(self, at: Sequence[float], other: AABB) -> tuple[bool, AABB]:
        """Return whether the block at ``at`` intersects ``other``, and its box."""
        box = self.bounding_box + at
        return box.intersects(other), box

    def get_bounding_boxes(self) -> list[AABB]:
        """Return the collision boxes, not moved by any position."""
        return [self.bounding_box]


class BlockRegistry:
    """Looks blocks up by their type data or by name."""

    def __init__(self) -> None:
        self._blocks: dict[int, Block] = {}
        self._names: dict[str, Block] = {}

    def get_block(self, data: int) -> Block | None:
        """Return the block for ``data``, falling back to meta 0 of that id."""
        block = self._blocks.get(data)
        if block is None:
            block = self._blocks.get(data & ~15)
        return block

    def get_block_by_meta(self, block_type: int, meta: int) -> Block | None:
        data = ((block_type << 4) | (meta & 15)) & 0xFFFF
        return self.get_block(data)

    def get_block_by_name(self, name: str) -> Block | None:
        return self._names.get(name)

    def register_block(self, block: Block) -> None:
        self._blocks[block.type] = block
        self._names[block.name] = block

    def clear(self) -> None:
        self._blocks.clear()
        self._names.clear()

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks.values())


_DEFAULT_REGISTRY = BlockRegistry()


def default_registry() -> BlockRegistry:
    """Return the registry shared by the whole process."""
    return _DEFAULT_REGISTRY