"""Discover HTTP routes declared in source files."""

from __future__ import annotations

import re
from collections.abc import Iterable

from postmangen.models import GroupRoute, ListCatalog, ListRoute
from postmangen.textutils import clear_parts, name_up

_QUOTED = re.compile(r'"(.*?)"')
_PARENS = re.compile(r"\((.*?)\)")
_CHI_CALL = re.compile(r'r\.\w+\([\t\n\f\r ]*"[^"]+"', re.ASCII)


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        return handle.read().split("\n")


def group_routes(routes: Iterable[ListRoute]) -> list[GroupRoute]:
    """Group routes by the first segment of their link.

    Routes with a single segment always start a group of their own; routes
    whose link has no segment at all are dropped. Group names are
    capitalised at the end.
    """
    groups: list[GroupRoute] = []
    for route in routes:
        parts = clear_parts(route.link.split("/"))
        if not parts:
            continue
        if len(parts) > 1:
            existing = next((group for group in groups if group.name == parts[0]), None)
            if existing is not None:
                existing.group.append(route)
                continue
        groups.append(GroupRoute(name=parts[0], group=[route]))
    for group in groups:
        group.name = name_up(group.name)
    return groups


def get_routes(catalogs: Iterable[ListCatalog]) -> list[ListRoute]:
    """Return every ``router.HandleFunc`` route found in the catalogs' files."""
    routes = []
    for catalog in catalogs:
        for file_name in catalog.files:
            for line in _read_lines(f"{catalog.path}/{file_name}"):
                if "router.HandleFunc" in line:
                    routes.append(parse_route_line(line))
    return routes


def get_routes_chi(catalogs: Iterable[ListCatalog]) -> list[GroupRoute]:
    """Return one group for every ``r.Route`` block found in the catalogs' files."""
    groups = []
    for catalog in catalogs:
        for file_name in catalog.files:
            block: list[str] = []
            started = False
            for line in _read_lines(f"{catalog.path}/{file_name}"):
                if "r.Route" in line:
                    started = True
                if started:
                    block.append(line)
                if started and "})" in line:
                    started = False
                    groups.append(parse_chi_block(block))
                    block = []
    return groups


def split_logical_lines(text: str) -> list[str]:
    """Return the ``r.Method("path"`` calls found in ``text``, cleaned up."""
    return [
        match.replace("\t", "").replace("\n", "").strip()
        for match in _CHI_CALL.findall(text)
    ]


def parse_chi_block(lines: Iterable[str]) -> GroupRoute:
    """Build a route group from the lines of one ``r.Route`` block."""
    calls = split_logical_lines("\n".join(lines))
    if not calls:
        raise ValueError("route block holds no route calls")
    group_path = calls[0].replace('r.Route("', "").strip('")')
    group_name = group_path.strip("/")
    result = GroupRoute(name=name_up(group_name))
    for call in calls[1:]:
        head, quote, path = call.partition('"')
        if not quote:
            continue
        method_parts = head.split("(")
        if len(method_parts) < 2:
            continue
        method = method_parts[0][2:].strip().upper()
        path = path.strip().replace('"', "")
        result.group.append(
            ListRoute(
                name=name_from_path(path),
                link=f"/{group_name}{path}",
                method=method,
            )
        )
    return result


def _is_separator(char: str) -> bool:
    if ord(char) < 0x80:
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdigit():
        return False
    return char.isspace()


def _title_words(text: str) -> str:
    """Capitalise the first letter of each word, leaving the rest as is."""
    result = []
    previous_separates = True
    for char in text:
        if previous_separates:
            titled = char.title()
            result.append(titled if len(titled) == 1 else char)
        else:
            result.append(char)
        previous_separates = _is_separator(char)
    return "".join(result)


def name_from_path(path: str) -> str:
    """Name a route after the first segment of its path, hyphens as spaces."""
    first = path.strip("/").split("/")[0]
    return _title_words(first.replace("-", " "))


def _handler_reference(line: str) -> tuple[str, str]:
    """Return (package, function) of the handler named in a route line."""
    arguments_match = _PARENS.search(line)
    if arguments_match is None:
        raise ValueError(f"route line has no argument list: {line!r}")
    arguments = clear_parts(arguments_match.group(1).split(","))
    if len(arguments) < 2:
        raise ValueError(f"route line names no handler: {line!r}")
    reference = clear_parts(arguments[1].split("."))
    if not reference:
        raise ValueError(f"route line has an empty handler: {line!r}")
    if len(reference) > 1:
        return reference[0], reference[1]
    return "/", reference[0]


def parse_route_line(line: str) -> ListRoute:
    """Parse one ``router.HandleFunc`` line into a route."""
    quoted = _QUOTED.findall(line)
    if not quoted:
        raise ValueError(f"route line has no quoted path: {line!r}")
    link = quoted[0]
    method = quoted[1] if len(quoted) >= 2 else ""
    parts = clear_parts(link.split("/"))
    if len(parts) > 1:
        name = "".join(name_up(part) for part in parts[1:])
    elif parts:
        name = name_up(parts[0])
    else:
        name = ""
    folder, function = _handler_reference(line)
    return ListRoute(
        name=name,
        link=link,
        function=function,
        folder=folder,
        method=method,
        origin=line,
    )