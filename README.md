# craftclient

Building blocks for a Minecraft protocol client. It covers world and chunk storage, entity and attribute models, the Forge handshake, protocol-version detection and session-server hashing. The package uses only the standard library.

## Modules

- `craftclient.hashing`
  - `sha1_hex_digest(digest)` returns the signed, leading-zero-stripped hexadecimal form of a 20-byte SHA-1 digest. This is the form the session server expects.
  - `sha1_twos_complement(digest)` returns the two's complement of a digest.
  - `base64_decode(message)` decodes Base64 text. It raises `ValueError` on invalid input.
  - `sha1_digest_test()` checks the hex digest against known reference values.
- `craftclient.tokenizer`: `Tokenizer` splits a string on a single-character delimiter. When it is given a maximum number of tokens, the last token holds the rest of the line. The tokens can be iterated, indexed and counted with `len()`.
- `craftclient.observer`: `ObserverSubject` keeps a list of listeners. `notify_listeners` calls a method on each of them, given either as a method name or as a callable.
- `craftclient.http`:
  - `HTTPClient` is the interface, with `get`, `post` and `post_json`.
  - `UrllibHTTPClient` implements it with `urllib`. Its default timeout is 12 seconds.
  - Each request returns an `HTTPResponse` with `status`, `headers` and `body`. A status of `0` means no response was received.
  - `parse_status` and `parse_response_headers` read a raw header block.
- `craftclient.attribute`: `Attribute` holds a base value and a list of `Modifier`s.
  - `get_amount()` applies the modifiers in this order: additions first, then percentage additions of the added value, then multiplications.
  - `ModifierOperation` names the three kinds of modifier.
- `craftclient.entity`:
  - `Entity`, `LivingEntity`, `PlayerEntity`, `PaintingEntity` (with `PaintingDirection`) and `XPOrb` are the entity models.
  - `EntityType` lists the entity ids.
  - `Entity.get_attribute` returns a copy of the named attribute, or a zero attribute if the entity does not have it.
- `craftclient.block`:
  - `AABB` is an axis-aligned box with `intersects` and `offset`.
  - `Block` describes a block type. Its `type` is the id shifted left by four, plus the meta value.
  - `BlockRegistry` looks blocks up by data, by id and meta, or by name. It falls back to meta 0 when a meta variant is not registered.
  - `default_registry()` returns the registry shared by the whole process.
- `craftclient.chunk`:
  - `Chunk` is a 16×16×16 section stored as packed palette indices.
  - `ChunkColumn` is a stack of 16 sections plus the block entities inside them.
  - `ChunkColumnMetadata` holds a column's coordinates, section mask and flags.
  - `read_chunk_column` reads the sections named by the section mask from chunk data. The data can be given as bytes or as a binary stream.
- `craftclient.world`: `World` keeps the loaded columns, keyed by chunk coordinates.
  - It applies block changes, multi-block changes, explosions, block-entity updates, unloads and respawns.
  - Each change is reported to registered `WorldListener`s through `on_block_change`, `on_chunk_load` and `on_chunk_unload`.
  - The base `WorldListener` records every notification in `events`.
- `craftclient.forge`: `ForgeHandler` answers the FML handshake on the `FML|HS` channel.
  - It sends every reply through the `send(channel, payload)` callable you give it.
  - `handle_ping_response` collects the server's mod list (`ModInfo`) from the status JSON.
- `craftclient.versions`: `version_from_ping` reads the protocol number from a status response. It returns the lowest supported `ProtocolVersion` at or above that number, or `None` if there is no such version.

## Examples

Hash a session-server id:

```python
import hashlib
from craftclient.hashing import sha1_hex_digest

sha1_hex_digest(hashlib.sha1(b"jeb_").digest())
# '-7c9d5b0044c130109a5d7b5fb5c317c02b4e28c1'
```

Compute an attribute's modified value:

```python
import uuid
from craftclient.attribute import Attribute, Modifier, ModifierOperation

speed = Attribute("generic.movementSpeed", 0.1)
speed.add_modifier(Modifier(uuid.uuid4(), 0.3, ModifierOperation.MULTIPLY_PERCENT))
speed.get_amount()  # 0.13 (up to float rounding)
```

Store blocks in a world and watch the changes:

```python
from craftclient.block import Block, BlockRegistry
from craftclient.chunk import ChunkColumn, ChunkColumnMetadata
from craftclient.world import World, WorldListener

registry = BlockRegistry()
registry.register_block(Block("air", 0, solid=False))
registry.register_block(Block("stone", 1 << 4))

world = World(registry)
listener = WorldListener()
world.register_listener(listener)

world.load_chunk(ChunkColumn(ChunkColumnMetadata(x=0, z=0), registry))
world.apply_block_change((1, 2, 3), 1 << 4)
world.get_block((1, 2, 3)).name   # 'stone'
listener.events[-1][0]            # 'block_change'
```

Answer a Forge handshake message:

```python
from craftclient.forge import ForgeHandler

sent = []
handler = ForgeHandler(lambda channel, payload: sent.append((channel, payload)))
handler.handle_plugin_message("FML|HS", bytes([2]))   # server mod list
sent  # [('FML|HS', b'\xff\x02')]
```

Pick a protocol version from a ping response:

```python
from craftclient.versions import version_from_ping

version_from_ping({"version": {"protocol": 316}})   # ProtocolVersion.MINECRAFT_1_11_2
```

## What the package does not do

- It does not open connections to a game server. It does not frame, encode, compress or encrypt packets. It does not log in or authenticate.
  - `World`, `ForgeHandler` and `version_from_ping` work on data that you pass in.
  - `ForgeHandler` hands its replies to your `send` callable.
- No block types are registered for you. `default_registry()` starts empty, so register the blocks you need, including air at data `0`.
  - Lookups of unregistered data return `None`.
  - `World.set_block` raises `KeyError` for block data that is not registered.
- `UrllibHTTPClient` does not follow redirects. It does not verify TLS certificates.

## Running the tests

Install the package with its `test` extra, then run `pytest`.