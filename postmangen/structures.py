"""Find struct declarations in source files and build JSON body samples."""

from __future__ import annotations

import re
from collections.abc import Iterable

from postmangen.models import ListCatalog, ListModel
from postmangen.textutils import clear_parts

_UNKNOWN = "???"
_JSON_TAG = re.compile(r'json:"(\w+)"', re.ASCII)


def _struct_follows(lines: list[str], index: int) -> bool:
    """Whether one of the two lines after ``index`` mentions ``struct``."""
    following = lines[index + 1:index + 3]
    if not following:
        raise ValueError(f"line {index + 1} mentions 'type' but is the last line")
    if "struct" in following[0]:
        return True
    if len(following) < 2:
        raise ValueError(f"line {index + 1} mentions 'type' too close to the end")
    return "struct" in following[1]


def _declared_name(line: str) -> str:
    for token in ("type", "struct", "{", " "):
        line = line.replace(token, "")
    return line


def parse_structs(text: str) -> list[ListModel]:
    """Return the struct declarations found in one file's text."""
    lines = text.split("\n")
    models = []
    in_struct = False
    joining = False
    joined = ""
    body: list[str] = []
    name = ""
    depth = 0
    for index, line in enumerate(lines):
        if "type" in line and _struct_follows(lines, index):
            in_struct = True
            joining = True
            line = line.replace("(", "")
        if joining:
            if "//" in line:
                continue
            line = line.replace("\t", "")
            joined += line
            if "{" not in line:
                continue
            joining = False
            line = joined
            joined = ""
        if "type" in line and "struct" in line:
            in_struct = True
            name = _declared_name(line)
        if in_struct:
            body.append(line)
            if "{" in line:
                depth += 1
            if "}" in line:
                depth -= 1
            if depth == 0:
                in_struct = False
                models.append(ListModel(name=name, structure="\n".join(body)))
                body = []
    return models


def get_structs(catalogs: Iterable[ListCatalog]) -> list[ListModel]:
    """Parse every ``.go`` file of the catalogs and fill in JSON samples."""
    models = []
    for catalog in catalogs:
        for file_name in catalog.files:
            if ".go" not in file_name:
                continue
            with open(f"{catalog.path}/{file_name}", encoding="utf-8", errors="replace") as handle:
                models.extend(parse_structs(handle.read()))
    return json_structure(models)


def type_placeholder(line: str) -> str:
    """Return a sample JSON value for the type mentioned in ``line``."""
    if "uint" in line or "int" in line:
        return "0"
    if "float64" in line:
        return "0.1"
    if "string" in line:
        return '"text"'
    if "bool" in line:
        return "false"
    if "time.Time" in line or "time.time" in line:
        return '"2022-03-14T05:40:00.000Z"'
    if "struct" in line:
        return '"text"'
    return _UNKNOWN


def _set_commas(entries: list[str]) -> list[str]:
    last_with_comma = len(entries) - 2
    return [
        (entry + "," if 0 < position < last_with_comma else entry).replace("\t", "")
        for position, entry in enumerate(entries)
    ]


def _sample_entry(line: str) -> str | None:
    """Return the JSON line for one struct line, or None when it is dropped."""
    tag = _JSON_TAG.search(line)
    if tag is None:
        if "-" in line:
            return None
        words = clear_parts(line.strip(" ").split(" "))
        if len(words) > 1:
            return f'    "{words[0]}":{type_placeholder(words[1])}'
        return line.strip(" ")
    placeholder = type_placeholder(line)
    key = tag.group(1)
    if placeholder == _UNKNOWN or key == "id":
        return None
    return f'    "{key}":{placeholder}'


def json_structure(models: list[ListModel]) -> list[ListModel]:
    """Fill ``jsonschema`` of every model from its structure; returns the list."""
    for model in models:
        raw = (
            model.structure.replace("type", "")
            .replace(model.name, "")
            .replace(",omitempty", "")
        )
        entries = []
        for position, line in enumerate(raw.split("\n")):
            if position == 0:
                line = line.replace("struct", "")
            entry = _sample_entry(line.lower())
            if entry is not None:
                entries.append(entry)
        model.jsonschema = "\n".join(_set_commas(entries))
    return models