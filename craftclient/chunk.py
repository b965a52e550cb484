"""Chunk sections and the columns of sections that make up the world."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, BinaryIO, Iterator

from .block import Block, BlockRegistry, default_registry

Position = tuple[int, int, int]

CHUNKS_PER_COLUMN = 16
SECTION_SIZE = 16
BLOCKS_PER_SECTION = SECTION_SIZE**3
LIGHT_BYTES = BLOCKS_PER_SECTION // 2
DEFAULT_BITS_PER_BLOCK = 4
# At this many bits per block the data holds block types, not palette indices.
DIRECT_PALETTE_BITS = 9

_MASK64 = (1 << 64) - 1


@dataclass
class ChunkColumnMetadata:
    """Where a column sits and which of its sections carry data."""

    x: int = 0
    z: int = 0
    sectionmask: int = 0
    continuous: bool = False
    skylight: bool = False


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _read_varint(stream: BinaryIO) -> int:
    result = 0
    for shift in range(0, 35, 7):
        byte = _read_exact(stream, 1)[0]
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            break
    else:
        raise ValueError("VarInt is too long")
    result &= 0xFFFFFFFF
    return result - (1 << 32) if result & (1 << 31) else result


def _in_section(position: Position) -> bool:
    return all(0 <= coord < SECTION_SIZE for coord in position)


class Chunk:
    """A 16x16x16 section of blocks stored as packed palette indices."""

    def __init__(self, registry: BlockRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.bits_per_block = DEFAULT_BITS_PER_BLOCK
        self.palette: list[int] = []
        self.data: list[int] = []

    def _air(self) -> Block | None:
        return self.registry.get_block(0)

    def _locate(self, position: Position) -> tuple[int, int, int, int]:
        x, y, z = position
        bits = self.bits_per_block
        index = (y * SECTION_SIZE + z) * SECTION_SIZE + x
        bit_index = index * bits
        start = bit_index // 64
        end = ((index + 1) * bits - 1) // 64
        return start, end, bit_index % 64, (1 << bits) - 1

    def load(self, stream: BinaryIO, skylight: bool = False) -> None:
        """Read one section from ``stream``, skipping its light data."""
        self.bits_per_block = _read_exact(stream, 1)[0]

        palette_length = _read_varint(stream)
        self.palette.extend(_read_varint(stream) & 0xFFFF for _ in range(palette_length))

        data_length = _read_varint(stream)
        self.data = [
            int.from_bytes(_read_exact(stream, 8), "big") for _ in range(data_length)
        ]

        stream.read(LIGHT_BYTES)
        if skylight:
            stream.read(LIGHT_BYTES)

    def get_block(self, position: Position) -> Block | None:
        """Return the block at a position inside the section; air outside it."""
        if not _in_section(position) or not self.data:
            return self._air()

        start, end, sub, max_value = self._locate(position)
        if start == end:
            value = (self.data[start] >> sub) & max_value
        else:
            combined = (self.data[start] >> sub) | (self.data[end] << (64 - sub))
            value = combined & max_value

        if self.bits_per_block < DIRECT_PALETTE_BITS:
            block_type = self.palette[value]
        else:
            block_type = value
        return self.registry.get_block(block_type & 0xFFFF)

    def set_block(self, position: Position, block: Block | None) -> None:
        """Store ``block`` at a position inside the section."""
        if block is None:
            raise ValueError("cannot place an unknown block")
        if not _in_section(position):
            raise ValueError(f"position {position} is outside the section")

        if self.bits_per_block == 0:
            self.bits_per_block = DEFAULT_BITS_PER_BLOCK

        if not self.data:
            self.palette.append(0)
            self.data = [0] * (BLOCKS_PER_SECTION * self.bits_per_block // 64)

        block_type = block.type
        if self.bits_per_block < DIRECT_PALETTE_BITS:
            try:
                value = self.palette.index(block_type)
            except ValueError:
                self.palette.append(block_type)
                value = len(self.palette) - 1
        else:
            value = block_type

        start, end, sub, max_value = self._locate(position)
        value &= max_value

        self.data[start] = (
            (self.data[start] & ~(max_value << sub)) | (value << sub)
        ) & _MASK64

        if start != end:
            end_sub = 64 - sub
            self.data[end] = (
                (self.data[end] >> end_sub << end_sub) | (value >> end_sub)
            ) & _MASK64


class ChunkColumn:
    """A vertical stack of sections plus the block entities inside it."""

    def __init__(
        self, metadata: ChunkColumnMetadata, registry: BlockRegistry | None = None
    ) -> None:
        self.metadata = metadata
        self.registry = registry if registry is not None else default_registry()
        self._chunks: list[Chunk | None] = [None] * CHUNKS_PER_COLUMN
        self._block_entities: dict[Position, Any] = {}

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < CHUNKS_PER_COLUMN:
            raise IndexError(f"section index out of range: {index}")

    def __getitem__(self, index: int) -> Chunk | None:
        self._check_index(index)
        return self._chunks[index]

    def __setitem__(self, index: int, chunk: Chunk | None) -> None:
        self._check_index(index)
        self._chunks[index] = chunk

    def __iter__(self) -> Iterator[Chunk | None]:
        return iter(self._chunks)

    def __len__(self) -> int:
        return CHUNKS_PER_COLUMN

    def get_block(self, position: Position) -> Block | None:
        """Return the block at a column-relative position; air if absent."""
        x, y, z = position
        if y < 0 or y // SECTION_SIZE >= CHUNKS_PER_COLUMN:
            return self.registry.get_block(0)
        chunk = self._chunks[y // SECTION_SIZE]
        if chunk is None:
            return self.registry.get_block(0)
        return chunk.get_block((x, y % SECTION_SIZE, z))

    def get_block_entity(self, position: Position) -> Any:
        return self._block_entities.get(tuple(position))

    def get_block_entities(self) -> list[Any]:
        return list(self._block_entities.values())

    def add_block_entity(self, position: Position, entity: Any) -> None:
        self._block_entities[tuple(position)] = entity

    def remove_block_entity(self, position: Position) -> None:
        self._block_entities.pop(tuple(position), None)


def read_chunk_column(
    data: bytes | bytearray | memoryview | BinaryIO,
    metadata: ChunkColumnMetadata,
    registry: BlockRegistry | None = None,
) -> ChunkColumn:
    """Read the sections named by ``metadata.sectionmask`` into a new column."""
    stream = io.BytesIO(bytes(data)) if isinstance(data, (bytes, bytearray, memoryview)) else data

    column = ChunkColumn(metadata, registry)
    for index in range(CHUNKS_PER_COLUMN):
        if metadata.sectionmask & (1 << index):
            chunk = Chunk(column.registry)
            chunk.load(stream, metadata.skylight)
            column[index] = chunk
    return column