"""Newline-delimited JSON-RPC tool server on stdin/stdout.

Tool invocations never fault at the protocol level: every failure comes back
as a result flagged ``isError`` carrying a caller-safe message.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from typing import IO, Any, Callable, Optional, TextIO, Union

from . import __version__
from .errors import ChalupyError, InvalidParameter
from .service import ChalupyService

log = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "chalupy-mcp"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

GENERIC_ERROR_MESSAGE = "Unexpected error"

# Only messages matching one of these reach the caller verbatim.
SAFE_MESSAGE_PATTERNS = [
    re.compile(r"^Invalid parameter '[A-Za-z]+': "),
    re.compile(r"^Invalid URL "),
    re.compile(r"^HTTP error! status: \d{3}"),
    re.compile(r"^Request timed out after "),
    re.compile(r"^Network error: "),
    re.compile(r"^Too many redirects"),
    re.compile(r"^Unknown tool: "),
]

TOOLS: list[dict[str, Any]] = [
    {
        "name": "list_regions",
        "description": "Vrátí seznam všech dostupných regionů pro vyhledávání (např. vysocina, krkonose, sumava)",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "list_features",
        "description": (
            "Vrátí seznam všech dostupných vlastností/vybavení pro filtrování "
            "(např. bazen-venkovni, se-saunou, s-virivkou)"
        ),
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "search_chalupy",
        "description": (
            "Vyhledá pronájmy chalup a chat na e-chalupy.cz podle zadaných kritérií. "
            "Všechny parametry jsou volitelné a lze je libovolně kombinovat."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Volitelné textové vyhledávání v názvech, popisech a lokalitách objektů",
                },
                "region": {
                    "type": "string",
                    "description": (
                        "Volitelný slug regionu (např. 'vysocina', 'krkonose', 'sumava'). "
                        "Použij list_regions pro výpis všech dostupných regionů."
                    ),
                },
                "features": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": (
                        "Volitelné pole slugů vlastností (např. ['bazen-venkovni', 'se-saunou']). "
                        "Použij list_features pro výpis všech dostupných vlastností."
                    ),
                },
                "persons": {
                    "type": "number",
                    "description": "Volitelný počet osob - objekty s kapacitou alespoň pro tento počet osob",
                },
                "dateFrom": {
                    "type": "string",
                    "description": "Volitelné datum začátku pobytu ve formátu YYYY-MM-DD (např. '2026-07-11')",
                },
                "dateTo": {
                    "type": "string",
                    "description": "Volitelné datum konce pobytu ve formátu YYYY-MM-DD (např. '2026-07-18')",
                },
                "priceMin": {
                    "type": "number",
                    "description": "Volitelná minimální cena v Kč",
                },
                "priceMax": {
                    "type": "number",
                    "description": "Volitelná maximální cena v Kč",
                },
                "maxResults": {
                    "type": "number",
                    "description": "Volitelný maximální počet vrácených výsledků (výchozí 10, nejvýše 100)",
                    "default": 10,
                },
            },
        },
    },
    {
        "name": "get_property_details",
        "description": (
            "Získá detailní informace o konkrétním objektu k pronájmu "
            "včetně kapacity, počtu ložnic a vybavení"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "URL adresa objektu na e-chalupy.cz"},
            },
            "required": ["url"],
        },
    },
]


class UnknownTool(Exception):
    def __init__(self, name: Any) -> None:
        super().__init__(f"Unknown tool: {name}")


def safe_error_message(exc: BaseException) -> str:
    """Caller-visible text for exc; anything unexpected is logged and masked."""
    message = str(exc)
    if isinstance(exc, (ChalupyError, UnknownTool)) and any(p.match(message) for p in SAFE_MESSAGE_PATTERNS):
        return message
    log.error("Unexpected error while handling tool call", exc_info=exc)
    return GENERIC_ERROR_MESSAGE


def _text_result(payload: Any, is_error: bool = False) -> dict[str, Any]:
    text = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False, indent=2)
    result: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if is_error:
        result["isError"] = True
    return result


class ToolServer:
    """Dispatches JSON-RPC messages to ChalupyService."""

    def __init__(self, service: ChalupyService) -> None:
        self.service = service
        self._tools: dict[str, Callable[[dict[str, Any]], Any]] = {
            "search_chalupy": self._search,
            "get_property_details": self._details,
            "list_regions": lambda args: [r.to_dict() for r in self.service.list_regions()],
            "list_features": lambda args: [f.to_dict() for f in self.service.list_features()],
        }

    def _search(self, args: dict[str, Any]) -> list[dict[str, Any]]:
        return [l.to_dict() for l in self.service.search_listings(args)]

    def _details(self, args: dict[str, Any]) -> dict[str, Any]:
        if args.get("url") is None:
            raise InvalidParameter("url", "is required")
        return self.service.get_listing_details(args["url"]).to_dict()

    def call_tool(self, name: Any, arguments: Any) -> dict[str, Any]:
        """Run one tool; failures become an isError result, never an exception."""
        try:
            handler = self._tools.get(name) if isinstance(name, str) else None
            if handler is None:
                raise UnknownTool(name)
            if arguments is None:
                arguments = {}
            if not isinstance(arguments, dict):
                raise InvalidParameter("arguments", "must be an object")
            payload = handler(arguments)
        except Exception as exc:
            return _text_result(f"Chyba: {safe_error_message(exc)}", is_error=True)
        return _text_result(payload)

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": __version__},
        }

    def _tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        log.info("Tool call: %s", params.get("name"))
        return self.call_tool(params.get("name"), params.get("arguments"))

    def handle_message(self, message: Any) -> Optional[dict[str, Any]]:
        """Handle one decoded message. Returns None for notifications."""
        if not isinstance(message, dict):
            return _error(None, INVALID_REQUEST, "Invalid Request")
        msg_id = message.get("id")
        is_notification = "id" not in message
        method = message.get("method")
        if not isinstance(method, str):
            return None if is_notification else _error(msg_id, INVALID_REQUEST, "Invalid Request")

        params = message.get("params") or {}
        if not isinstance(params, dict):
            return None if is_notification else _error(msg_id, INVALID_PARAMS, "Invalid params")

        handlers: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            "initialize": self._initialize,
            "ping": lambda p: {},
            "tools/list": lambda p: {"tools": TOOLS},
            "tools/call": self._tools_call,
        }
        handler = handlers.get(method)
        if is_notification:
            if handler is None and not method.startswith("notifications/"):
                log.debug("Ignoring unknown notification %s", method)
            return None
        if handler is None:
            return _error(msg_id, METHOD_NOT_FOUND, f"Method not found: {method}")
        try:
            result = handler(params)
        except Exception:
            log.exception("Internal error handling %s", method)
            return _error(msg_id, INTERNAL_ERROR, GENERIC_ERROR_MESSAGE)
        return {"jsonrpc": "2.0", "id": msg_id, "result": result}

    def handle_line(self, line: Union[str, bytes]) -> Optional[dict[str, Any]]:
        """Decode one input line. Blank lines yield None; undecodable ones a parse error."""
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError:
                return _error(None, PARSE_ERROR, "Parse error")
        if not line.strip():
            return None
        try:
            message = json.loads(line)
        except (ValueError, RecursionError):
            return _error(None, PARSE_ERROR, "Parse error")
        return self.handle_message(message)

    def serve(self, stdin: Optional[IO] = None, stdout: Optional[TextIO] = None) -> None:
        """Read requests line by line until EOF, one response line per request.

        stdin defaults to the raw byte stream so that invalid UTF-8 costs one
        parse error instead of the loop.
        """
        stdin = stdin if stdin is not None else sys.stdin.buffer
        stdout = stdout if stdout is not None else sys.stdout
        log.info("%s %s serving on stdio", SERVER_NAME, __version__)
        for line in stdin:
            response = self.handle_line(line)
            if response is not None:
                stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
                stdout.flush()
        log.info("stdin closed, shutting down")


def _error(msg_id: Any, code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": msg_id, "error": {"code": code, "message": message}}
