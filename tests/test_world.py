import pytest

from craftclient.block import Block, BlockRegistry
from craftclient.chunk import ChunkColumn, ChunkColumnMetadata
from craftclient.world import World, WorldListener

AIR = Block("air", 0, solid=False)
STONE = Block("stone", 16)
DIRT = Block("dirt", 48)


class Recorder(WorldListener):
    def __init__(self):
        self.events = []

    def on_block_change(self, position, new_block, old_block):
        self.events.append(("change", position, new_block, old_block))

    def on_chunk_load(self, chunk, metadata, index):
        self.events.append(("load", index))

    def on_chunk_unload(self, column):
        self.events.append(("unload", column))


@pytest.fixture
def registry():
    reg = BlockRegistry()
    for block in (AIR, STONE, DIRT):
        reg.register_block(block)
    return reg


@pytest.fixture
def world(registry):
    return World(registry)


@pytest.fixture
def recorder(world):
    listener = Recorder()
    world.register_listener(listener)
    return listener


def make_column(registry, x, z, sectionmask=1, continuous=True):
    meta = ChunkColumnMetadata(x=x, z=z, sectionmask=sectionmask, continuous=continuous)
    return ChunkColumn(meta, registry)


def test_set_block_without_chunk(world):
    assert world.set_block((0, 64, 0), 16) is False
    assert world.get_block((0, 64, 0)) is AIR


def test_load_chunk_notifies_each_section(world, registry, recorder):
    column = make_column(registry, 0, 0)
    world.load_chunk(column)
    assert recorder.events == [("load", i) for i in range(16)]
    assert world.get_chunk((5, 0, 5)) is column


def test_set_and_get_block(world, registry):
    world.load_chunk(make_column(registry, 0, 0))
    assert world.set_block((3, 70, 4), 16) is True
    assert world.get_block((3, 70, 4)) is STONE
    assert world.get_block((3.7, 70.2, 4.9)) is STONE
    assert world.get_block((3, 71, 4)) is AIR


def test_negative_coordinates(world, registry):
    column = make_column(registry, -1, -1)
    world.load_chunk(column)
    assert world.get_chunk((-1, 0, -16)) is column
    assert world.set_block((-1, 10, -16), 48)
    assert world.get_block((-1, 10, -16)) is DIRT
    assert column.get_block((15, 10, 0)) is DIRT


def test_set_block_errors(world, registry):
    world.load_chunk(make_column(registry, 0, 0))
    with pytest.raises(KeyError):
        world.set_block((0, 10, 0), 999 << 4)
    with pytest.raises(ValueError):
        world.set_block((0, 256, 0), 16)


def test_empty_continuous_chunk_clears(world, registry):
    world.load_chunk(make_column(registry, 0, 0))
    world.load_chunk(make_column(registry, 0, 0, sectionmask=0))
    assert world.get_chunk((0, 0, 0)) is None


def test_second_load_keeps_first_column(world, registry):
    first = make_column(registry, 0, 0)
    world.load_chunk(first)
    world.load_chunk(make_column(registry, 0, 0, continuous=False))
    assert world.get_chunk((1, 1, 1)) is first


def test_unload_chunk(world, registry, recorder):
    column = make_column(registry, 2, 3)
    world.load_chunk(column)
    recorder.events.clear()
    world.unload_chunk(2, 3)
    assert recorder.events == [("unload", column)]
    assert world.get_chunk((32, 0, 48)) is None
    world.unload_chunk(2, 3)
    assert recorder.events == [("unload", column)]


def test_block_change(world, registry, recorder):
    world.load_chunk(make_column(registry, 0, 0))
    world.update_block_entity((1, 64, 1), "chest")
    recorder.events.clear()
    world.apply_block_change((1, 64, 1), 16)
    assert recorder.events == [("change", (1, 64, 1), STONE, AIR)]
    assert world.get_block((1, 64, 1)) is STONE
    assert world.get_block_entity((1, 64, 1)) is None


def test_explosion_turns_blocks_to_air(world, registry, recorder):
    world.load_chunk(make_column(registry, 0, 0))
    world.set_block((2, 64, 2), 16)
    recorder.events.clear()
    world.apply_explosion((2.5, 64.5, 2.5), [(0, 0, 0)])
    assert world.get_block((2, 64, 2)) is AIR
    assert recorder.events == [("change", (2, 64, 2), AIR, STONE)]


def test_multi_block_change(world, registry, recorder):
    column = make_column(registry, 1, 0)
    world.load_chunk(column)
    recorder.events.clear()
    world.apply_multi_block_change(1, 0, [(2, 5, 3, 48), (0, 20, 0, 16)])
    assert world.get_block((18, 5, 3)) is DIRT
    assert world.get_block((16, 20, 0)) is STONE
    assert column[1] is not None
    assert [event[1] for event in recorder.events] == [(18, 5, 3), (16, 20, 0)]
    assert [event[2] for event in recorder.events] == [DIRT, STONE]


def test_multi_block_change_unknown_chunk(world, recorder):
    world.apply_multi_block_change(5, 5, [(0, 0, 0, 16)])
    assert recorder.events == []


def test_update_block_entity(world, registry):
    world.update_block_entity((0, 10, 0), "ignored")
    assert world.get_block_entities() == []
    world.load_chunk(make_column(registry, 0, 0))
    world.update_block_entity((4, 10, 4), "sign")
    assert world.get_block_entity((4, 10, 4)) == "sign"
    assert world.get_block_entities() == ["sign"]
    world.update_block_entity((4, 10, 4), None)
    assert world.get_block_entity((4, 10, 4)) is None


def test_respawn_unloads_everything(world, registry, recorder):
    first = make_column(registry, 0, 0)
    second = make_column(registry, 1, 1)
    world.load_chunk(first)
    world.load_chunk(second)
    recorder.events.clear()
    world.respawn()
    assert recorder.events == [("unload", first), ("unload", second)]
    assert world.get_chunk((0, 0, 0)) is None
    assert world.get_chunk((16, 0, 16)) is None