"""The loaded world: chunk columns keyed by chunk coordinates."""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence

from .block import Block, BlockRegistry, default_registry
from .chunk import (
    CHUNKS_PER_COLUMN,
    SECTION_SIZE,
    Chunk,
    ChunkColumn,
    ChunkColumnMetadata,
)
from .observer import ObserverSubject

Position = tuple[int, int, int]


def _block_pos(position: Sequence[float]) -> Position:
    x, y, z = position
    return (math.floor(x), math.floor(y), math.floor(z))


class WorldListener:
    """Receives notifications about changes to the world.

    The base implementation records every notification in ``events`` as a
    tuple of the event name followed by its arguments.
    """

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def on_block_change(
        self, position: Position, new_block: Block | None, old_block: Block | None
    ) -> None:
        """Called after the block at ``position`` changed."""
        self.events.append(("block_change", position, new_block, old_block))

    def on_chunk_load(
        self, chunk: Chunk | None, metadata: ChunkColumnMetadata, index: int
    ) -> None:
        """Called for each section of a column that was received."""
        self.events.append(("chunk_load", chunk, metadata, index))

    def on_chunk_unload(self, column: ChunkColumn | None) -> None:
        """Called before a column is dropped."""
        self.events.append(("chunk_unload", column))


class World(ObserverSubject[WorldListener]):
    """Holds chunk columns and applies block updates to them."""

    def __init__(self, registry: BlockRegistry | None = None) -> None:
        super().__init__()
        self.registry = registry if registry is not None else default_registry()
        self._chunks: dict[tuple[int, int], ChunkColumn | None] = {}

    def get_chunk(self, position: Sequence[float]) -> ChunkColumn | None:
        """Return the column holding a world position, if loaded."""
        x, _, z = _block_pos(position)
        return self._chunks.get((x // SECTION_SIZE, z // SECTION_SIZE))

    def get_block(self, position: Sequence[float]) -> Block | None:
        """Return the block at a world position; air where nothing is loaded."""
        pos = _block_pos(position)
        column = self.get_chunk(pos)
        if column is None:
            return self.registry.get_block(0)
        x, y, z = pos
        return column.get_block((x % SECTION_SIZE, y, z % SECTION_SIZE))

    def set_block(self, position: Sequence[float], block_data: int) -> bool:
        """Set a block; returns False if its column is not loaded."""
        pos = _block_pos(position)
        column = self.get_chunk(pos)
        if column is None:
            return False

        x, y, z = pos
        if not 0 <= y < SECTION_SIZE * CHUNKS_PER_COLUMN:
            raise ValueError(f"height out of range: {y}")

        block = self.registry.get_block(block_data)
        if block is None:
            raise KeyError(f"unknown block data: {block_data}")

        index = y // SECTION_SIZE
        section = column[index]
        if section is None:
            section = Chunk(self.registry)
            column[index] = section

        section.set_block((x % SECTION_SIZE, y % SECTION_SIZE, z % SECTION_SIZE), block)
        return True

    def get_block_entity(self, position: Sequence[float]) -> Any:
        pos = _block_pos(position)
        column = self.get_chunk(pos)
        if column is None:
            return None
        return column.get_block_entity(pos)

    def get_block_entities(self) -> list[Any]:
        return [
            entity
            for column in self._chunks.values()
            if column is not None
            for entity in column.get_block_entities()
        ]

    def load_chunk(self, column: ChunkColumn) -> None:
        """Store a received column and report each of its sections."""
        meta = column.metadata
        key = (meta.x, meta.z)

        if meta.continuous and meta.sectionmask == 0:
            self._chunks[key] = None
            return

        if self._chunks.get(key) is None:
            self._chunks[key] = column

        for index in range(CHUNKS_PER_COLUMN):
            self.notify_listeners("on_chunk_load", column[index], meta, index)

    def unload_chunk(self, chunk_x: int, chunk_z: int) -> None:
        key = (chunk_x, chunk_z)
        if key not in self._chunks:
            return
        self.notify_listeners("on_chunk_unload", self._chunks[key])
        del self._chunks[key]

    def apply_explosion(
        self, position: Sequence[float], offsets: Iterable[Sequence[float]]
    ) -> None:
        """Turn every block hit by an explosion into air."""
        for offset in offsets:
            absolute = tuple(p + o for p, o in zip(position, offset))
            block_pos = _block_pos(absolute)
            old_block = self.get_block(absolute)
            self.set_block(block_pos, 0)
            new_block = self.registry.get_block(0)
            self.notify_listeners("on_block_change", block_pos, new_block, old_block)

    def apply_multi_block_change(
        self,
        chunk_x: int,
        chunk_z: int,
        changes: Iterable[tuple[int, int, int, int]],
    ) -> None:
        """Apply ``(x, y, z, block_data)`` changes relative to one column."""
        column = self._chunks.get((chunk_x, chunk_z))
        if column is None:
            return

        start_x, start_z = chunk_x * SECTION_SIZE, chunk_z * SECTION_SIZE
        for x, y, z, block_data in changes:
            world_pos = (start_x + x, y, start_z + z)
            column.remove_block_entity(world_pos)

            index = y // SECTION_SIZE
            old_block = self.registry.get_block(0)
            section = column[index]
            if section is None:
                section = Chunk(self.registry)
                column[index] = section
            else:
                old_block = column.get_block((x, y, z))

            new_block = self.registry.get_block(block_data)
            section.set_block((x, y % SECTION_SIZE, z), new_block)
            self.notify_listeners("on_block_change", world_pos, new_block, old_block)

    def apply_block_change(self, position: Sequence[float], block_data: int) -> None:
        pos = _block_pos(position)
        new_block = self.registry.get_block(block_data & 0xFFFF)
        old_block = self.get_block(pos)

        self.set_block(pos, block_data)
        self.notify_listeners("on_block_change", pos, new_block, old_block)

        column = self.get_chunk(pos)
        if column is not None:
            column.remove_block_entity(pos)

    def update_block_entity(self, position: Sequence[float], entity: Any) -> None:
        """Replace the block entity at a position; ``None`` just removes it."""
        pos = _block_pos(position)
        column = self.get_chunk(pos)
        if column is None:
            return
        column.remove_block_entity(pos)
        if entity is not None:
            column.add_block_entity(pos, entity)

    def respawn(self) -> None:
        """Drop every column; the server sends them again after a respawn."""
        for column in self._chunks.values():
            self.notify_listeners("on_chunk_unload", column)
        self._chunks.clear()