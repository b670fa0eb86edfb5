"""Plain records shared by the scanners and the collection builder."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ListModel:
    """A struct found in the sources, with its text and a JSON body sample."""

    name: str = ""
    structure: str = ""
    jsonschema: str = ""


@dataclass
class ListCatalog:
    """A scanned directory: its label, its path and the files it holds."""

    catalog: str = ""
    path: str = ""
    files: list[str] = field(default_factory=list)


@dataclass
class ListRoute:
    """One HTTP route discovered in the sources."""

    name: str = ""
    link: str = ""
    function: str = ""
    folder: str = ""
    method: str = ""
    origin: str = ""
    raw_body: str = ""


@dataclass
class GroupRoute:
    """A named group of routes sharing the first path segment."""

    name: str = ""
    group: list[ListRoute] = field(default_factory=list)