"""Minecraft protocol client building blocks: world, chunks, entities, Forge handshake, hashing."""

__version__ = "0.1.0"