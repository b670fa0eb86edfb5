"""Build a Postman v2.1 collection from route groups and write it to disk."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from typing import Any

from postmangen.models import GroupRoute, ListRoute
from postmangen.textutils import clear_parts

POSTMAN_ID = "06a8b372-5aec-4fe3-9d98-5687f5576b51"
SCHEMA_URL = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
BASE_HOST = "{{base}}"

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _request(route: ListRoute, host: str) -> dict[str, Any]:
    return {
        "method": route.method,
        "header": None,
        "body": {
            "mode": "raw",
            "raw": route.raw_body,
            "options": {"raw": {"language": "json"}},
        },
        "url": {
            "raw": route.link,
            "host": [host],
            "path": clear_parts(route.link.split("/")),
        },
    }


def build_response(route: ListRoute, host: str) -> dict[str, Any]:
    """Return the sample ``200 OK`` response saved with a route."""
    return {
        "name": route.name,
        "originalRequest": _request(route, host),
        "status": "OK",
        "code": 200,
        "_postman_previewlanguage": "json",
        "header": None,
        "cookie": None,
        "body": "",
    }


def _item(route: ListRoute, host: str) -> dict[str, Any]:
    return {
        "name": route.name,
        "request": _request(route, BASE_HOST),
        "response": [build_response(route, host)],
    }


def build_folders(groups: Iterable[GroupRoute], host: str) -> list[dict[str, Any]]:
    """Return one collection folder per route group."""
    return [
        {
            "name": group.name,
            "item": [_item(route, host) for route in group.group] or None,
        }
        for group in groups
    ]


def build_collection(
    groups: Iterable[GroupRoute], host: str, port: str, name: str
) -> dict[str, Any]:
    """Return the whole collection document as plain Python data."""
    folders = build_folders(groups, host)
    return {
        "info": {"_postman_id": POSTMAN_ID, "name": name, "schema": SCHEMA_URL},
        "item": folders or None,
        "event": None,
        "variable": [{"key": "base", "value": f"{host}:{port}"}],
    }


def _to_json(document: dict[str, Any]) -> str:
    text = json.dumps(document, indent=" ", ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    # Every line after the first carries a one-space prefix.
    return text.replace("\n", "\n ")


def generate_postman(
    path: str | os.PathLike[str],
    groups: Iterable[GroupRoute],
    host: str,
    port: str,
    name: str,
) -> list[dict[str, Any]]:
    """Write ``<path>/<name>.json`` and return the collection's folders."""
    collection = build_collection(groups, host, port, name)
    target = f"{os.fspath(path)}/{name}.json"
    with open(target, "w", encoding="utf-8") as handle:
        handle.write(_to_json(collection))
    return collection["item"] or []