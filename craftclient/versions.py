"""Working out the protocol version from a server's status response."""

from __future__ import annotations

import enum
from typing import Any, Mapping


class ProtocolVersion(enum.IntEnum):
    """Supported protocol versions, valued by their protocol number."""

    MINECRAFT_1_10_2 = 210
    MINECRAFT_1_11_0 = 315
    MINECRAFT_1_11_2 = 316
    MINECRAFT_1_12_0 = 335
    MINECRAFT_1_12_1 = 338
    MINECRAFT_1_12_2 = 340


DEFAULT_VERSION = ProtocolVersion.MINECRAFT_1_12_2


def version_from_ping(node: Mapping[str, Any]) -> ProtocolVersion | None:
    """Return the lowest supported version at or above the reported protocol.

    Returns None when the response has no integer protocol number or the
    number is above every supported version.
    """
    version = node.get("version") if isinstance(node, Mapping) else None
    if not isinstance(version, Mapping):
        return None

    protocol = version.get("protocol")
    if not isinstance(protocol, int) or isinstance(protocol, bool):
        return None

    return next((v for v in sorted(ProtocolVersion) if v >= protocol), None)