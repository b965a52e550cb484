"""Client side of the Forge mod-loader handshake."""

from __future__ import annotations

import enum
import json
import struct
from dataclasses import dataclass
from typing import Callable

HANDSHAKE_CHANNEL = "FML|HS"
REGISTER_CHANNEL = "REGISTER"
REGISTERED_CHANNELS = ("FML|HS", "FML", "FML|MP", "FML", "FORGE")

Sender = Callable[[str, bytes], None]


class ForgePacket(enum.IntEnum):
    """Discriminator byte of a handshake message."""

    SERVER_HELLO = 0
    CLIENT_HELLO = 1
    MOD_LIST = 2
    REGISTRY_DATA = 3
    HANDSHAKE_RESET = 254
    HANDSHAKE_ACK = 255


class HandshakeClientPhase(enum.IntEnum):
    START = 0
    HELLO = 1
    WAITING_SERVER_DATA = 2
    WAITING_SERVER_COMPLETE = 3
    PENDING_COMPLETE = 4
    COMPLETE = 5
    DONE = 6
    ERROR = 7


class HandshakeServerPhase(enum.IntEnum):
    START = 0
    HELLO = 1
    WAITING_ACK = 2
    COMPLETE = 3
    DONE = 4
    ERROR = 5


@dataclass(frozen=True)
class ModInfo:
    """A mod reported by the server: its id and version."""

    name: str
    version: str


def _encode_varint(value: int) -> bytes:
    value &= 0xFFFFFFFF
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _encode_string(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _encode_varint(len(raw)) + raw


def _require(data: bytes, size: int) -> None:
    if len(data) < size:
        raise ValueError(f"handshake message too short: {len(data)} < {size} bytes")


def _ack(phase: HandshakeClientPhase) -> bytes:
    return bytes((ForgePacket.HANDSHAKE_ACK, phase))


class ForgeHandler:
    """Answers the Forge handshake with the mod list taken from the ping response.

    ``send`` is called with a plugin channel name and the message payload.
    """

    def __init__(self, send: Sender) -> None:
        self.send = send
        self.mods: list[ModInfo] = []
        self.server_version: int | None = None
        self.server_dimension: int | None = None
        self._mod_info_received = False
        self._handlers: dict[str, Callable[[bytes], None]] = {
            HANDSHAKE_CHANNEL: self._handle_handshake,
        }

    def has_mod_info(self) -> bool:
        return self._mod_info_received

    def handle_ping_response(self, response: str) -> None:
        """Collect the mod list from a server status response."""
        try:
            data = json.loads(response)
        except (ValueError, TypeError):
            self._mod_info_received = True
            return

        modinfo = data.get("modinfo") if isinstance(data, dict) else None
        mod_list = modinfo.get("modList") if isinstance(modinfo, dict) else None

        if isinstance(mod_list, list):
            for mod in mod_list:
                if not isinstance(mod, dict):
                    continue
                mod_id = mod.get("modid")
                version = mod.get("version")
                if isinstance(mod_id, str) and isinstance(version, str):
                    self.mods.append(ModInfo(mod_id, version))

        self._mod_info_received = True

    def handle_plugin_message(self, channel: str, data: bytes) -> None:
        """Dispatch a plugin message; channels without a handler are ignored."""
        handler = self._handlers.get(channel)
        if handler is not None:
            handler(bytes(data))

    def _handle_handshake(self, data: bytes) -> None:
        if not data:
            return
        try:
            discriminator = ForgePacket(data[0])
        except ValueError:
            return

        if discriminator is ForgePacket.SERVER_HELLO:
            self._on_server_hello(data)
        elif discriminator is ForgePacket.MOD_LIST:
            self.send(HANDSHAKE_CHANNEL, _ack(HandshakeClientPhase.WAITING_SERVER_DATA))
        elif discriminator is ForgePacket.REGISTRY_DATA:
            _require(data, 2)
            if not data[1]:
                self.send(
                    HANDSHAKE_CHANNEL, _ack(HandshakeClientPhase.WAITING_SERVER_COMPLETE)
                )
        elif discriminator is ForgePacket.HANDSHAKE_ACK:
            _require(data, 2)
            if data[1] == HandshakeServerPhase.WAITING_ACK:
                self.send(HANDSHAKE_CHANNEL, _ack(HandshakeClientPhase.PENDING_COMPLETE))
            elif data[1] == HandshakeServerPhase.COMPLETE:
                self.send(HANDSHAKE_CHANNEL, _ack(HandshakeClientPhase.COMPLETE))

    def _on_server_hello(self, data: bytes) -> None:
        _require(data, 2)
        version = data[1]
        if version > 1 and len(data) > 2:
            _require(data, 6)
            (self.server_dimension,) = struct.unpack(">i", data[2:6])
        self.server_version = version

        register = b"".join(name.encode("utf-8") + b"\0" for name in REGISTERED_CHANNELS)
        self.send(REGISTER_CHANNEL, register)

        self.send(HANDSHAKE_CHANNEL, bytes((ForgePacket.CLIENT_HELLO, version)))

        mod_list = bytearray((ForgePacket.MOD_LIST,))
        mod_list += _encode_varint(len(self.mods))
        for mod in self.mods:
            mod_list += _encode_string(mod.name) + _encode_string(mod.version)
        self.send(HANDSHAKE_CHANNEL, bytes(mod_list))