"""Websocket host that exposes a Flip 7 game store to presentation clients."""

from .server import ScorekeeperError, ScorekeeperServer

__all__ = ["ScorekeeperError", "ScorekeeperServer"]
