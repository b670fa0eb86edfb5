"""Attach JSON request body samples to the routes that take a body."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from postmangen.models import GroupRoute, ListCatalog, ListModel, ListRoute
from postmangen.textutils import clear_parts

_DECODE = "err := json.NewDecoder(r.Body).Decode("
_HANDLER_SIGNATURE = "w http.ResponseWriter, r *http.Request"
_BODY_METHODS = ("POST", "PUT", "DELETE")
_CHI_BODY_METHODS = ("POST", "PUT")


def attach_raw_body(
    groups: list[GroupRoute],
    models: Sequence[ListModel],
    catalogs: Sequence[ListCatalog],
) -> list[GroupRoute]:
    """Fill ``raw_body`` of POST, PUT and DELETE routes from their handlers."""
    for group in groups:
        for route in group.group:
            if route.method in _BODY_METHODS:
                route.raw_body = model_for_route(route, catalogs, models)
    return groups


def attach_raw_body_chi(
    groups: list[GroupRoute], models: Sequence[ListModel]
) -> list[GroupRoute]:
    """Fill ``raw_body`` of every route from the model named like its group.

    POST and PUT routes get the group's model, or the ``Filter`` model when
    their link holds ``get-list``; all other routes get an empty body.
    """
    filter_schema = next((m.jsonschema for m in models if m.name == "Filter"), "")
    for group in groups:
        model_schema = next((m.jsonschema for m in models if m.name == group.name), "")
        for route in group.group:
            if route.method in _CHI_BODY_METHODS:
                route.raw_body = filter_schema if "get-list" in route.link else model_schema
            else:
                route.raw_body = ""
    return groups


def model_for_route(
    route: ListRoute,
    catalogs: Iterable[ListCatalog],
    models: Sequence[ListModel],
) -> str:
    """Return the JSON sample of the model that the route's handler decodes."""
    catalog = next((c for c in catalogs if c.catalog == route.folder), None)
    if catalog is None:
        return ""
    reference = search_model_code(find_handler_source(route.function, catalog))
    parts = clear_parts(reference.split("."))
    if not parts or not models:
        return ""
    if len(parts) < 2:
        raise ValueError(f"model reference has no package: {reference!r}")
    return next((m.jsonschema for m in models if m.name == parts[1]), "")


def search_model_code(code: str) -> str:
    """Return the type of the variable that the handler decodes the body into."""
    for line in code.split("\n"):
        if _DECODE in line:
            variable = (
                line.replace(_DECODE + "&", "")
                .replace(_DECODE, "")
                .replace(")", "")
                .replace("\t", "")
            )
            return model_from_declaration(variable, code)
    return ""


def model_from_declaration(model: str, code: str) -> str:
    """Return what the first ``:=`` line naming ``model`` assigns to it."""
    for line in code.split("\n"):
        if model in line and ":=" in line:
            result = line.replace(model, "")
            for token in (":=", "\t", " ", "&", "{", "}"):
                result = result.replace(token, "")
            return result
    return ""


def find_handler_source(function: str, catalog: ListCatalog) -> str:
    """Return the source of the HTTP handler ``function`` in the catalog's files.

    When several files hold it, the last one read wins; ``""`` when none does.
    """
    source = ""
    for file_name in catalog.files:
        with open(f"{catalog.path}/{file_name}", encoding="utf-8", errors="replace") as handle:
            lines = handle.read().split("\n")
        collected: list[str] = []
        inside = False
        depth = 0
        for line in lines:
            if function in line and _HANDLER_SIGNATURE in line:
                inside = True
            if not inside:
                continue
            collected.append(line)
            if "{" in line:
                depth += 1
            if "}" in line:
                depth -= 1
            if depth == 0:
                source = "\n".join(collected)
                break
    return source