from __future__ import annotations

import asyncio
import json
import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

import websockets
from websockets.asyncio.server import ServerConnection, serve

from flip7.game import collection_payload, new_id
from flip7.models import Action
from flip7.store import GameStore

LOGGER = logging.getLogger("scorekeeper_host")

# ScorekeeperServer lets a presentation client drive a GameStore over a
# websocket. Every dispatch runs under one lock so the store keeps a single
# writer; replies go back to the connection that asked.


class ScorekeeperError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


class ScorekeeperServer:
    def __init__(self, store: Optional[GameStore] = None) -> None:
        self.store = store if store is not None else GameStore()
        self.lock = asyncio.Lock()

    async def start(self, host: str = "0.0.0.0", port: int = 8765) -> None:
        async with serve(self._handle_connection, host, port, process_request=_process_request):
            LOGGER.info("Scorekeeper listening on %s:%s", host, port)
            await asyncio.Future()

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        LOGGER.info("Client connected: %s", websocket.remote_address)
        try:
            async for raw in websocket:
                await self._handle_message(websocket, raw)
        except websockets.ConnectionClosed:
            LOGGER.info("Client dropped: %s", websocket.remote_address)
            return
        LOGGER.info("Client disconnected: %s", websocket.remote_address)

    async def _handle_message(self, websocket: ServerConnection, raw: Any) -> None:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            await self._send_error(websocket, "BAD_JSON", "Message is not valid JSON")
            return
        if not isinstance(message, dict):
            await self._send_error(websocket, "BAD_JSON", "Message must be an object")
            return

        try:
            reply = await self._route(message)
        except ScorekeeperError as exc:
            LOGGER.warning("Rejected %s: %s", message.get("type"), exc.msg)
            await self._send_error(websocket, exc.code, exc.msg)
            return
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Failed to handle %s: %s", message.get("type"), exc)
            await self._send_error(websocket, "INTERNAL", "Internal error")
            return

        await self._send(websocket, reply)

    async def _route(self, message: Dict[str, Any]) -> Dict[str, Any]:
        msg_type = message.get("type")
        if msg_type == "action":
            try:
                action = Action.from_payload(message.get("action"))
            except ValueError as exc:
                raise ScorekeeperError("BAD_ACTION", str(exc)) from exc
            return await self._dispatch(action)

        if msg_type == "create_game":
            game_id = new_id()
            return await self._dispatch(Action.create_game(game_id), game_id=game_id)

        if msg_type == "add_player":
            game_id = message.get("game_id")
            name_raw = message.get("name")
            name = name_raw.strip() if isinstance(name_raw, str) else ""
            if not isinstance(game_id, str):
                raise ScorekeeperError("BAD_ACTION", "add_player requires game_id")
            if not name:
                raise ScorekeeperError("BAD_NAME", "Player name required")
            player_id = new_id()
            return await self._dispatch(Action.add_player(game_id, player_id, name), player_id=player_id)

        if msg_type == "snapshot":
            async with self.lock:
                return self._state_payload()

        raise ScorekeeperError("BAD_TYPE", f"Unknown message type {msg_type!r}")

    async def _dispatch(self, action: Action, **extra: str) -> Dict[str, Any]:
        async with self.lock:
            self.store.dispatch(action)
            LOGGER.info("%s game=%s", action.type.value, action.game_id)
            return self._state_payload() | extra

    def _state_payload(self) -> Dict[str, Any]:
        return {"type": "state", **collection_payload(self.store.state, self.store.rules)}

    async def _send(self, websocket: ServerConnection, payload: Dict[str, Any]) -> None:
        await websocket.send(json.dumps({"v": 1, **payload}))

    async def _send_error(self, websocket: ServerConnection, code: str, msg: str) -> None:
        await self._send(websocket, {"type": "error", "code": code, "msg": msg})


def _process_request(connection: ServerConnection, request):
    """Answer plain HTTP health checks; let websocket upgrades through."""
    if request.headers.get("Upgrade", "").lower() == "websocket":
        return None
    if request.path in {"/", "/health", "/healthz"}:
        return connection.respond(HTTPStatus.OK, "scorekeeper running\n")
    return connection.respond(HTTPStatus.NOT_FOUND, "not found\n")
