"""Scan a source tree and write a Postman collection for its routes."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from typing import Any

from postmangen.folders import get_folders
from postmangen.postman import generate_postman
from postmangen.rawbody import attach_raw_body, attach_raw_body_chi
from postmangen.routes import get_routes, get_routes_chi, group_routes
from postmangen.structures import get_structs


def start_generate(
    url: str, port: str, path: str | os.PathLike[str], name: str, chi: bool
) -> list[dict[str, Any]]:
    """Scan ``path`` and write ``<path>/<name>.json``; returns its folders.

    With ``chi`` the routes are read from ``r.Route`` blocks, otherwise from
    ``router.HandleFunc`` lines.
    """
    catalogs = get_folders(path)
    if chi:
        groups = get_routes_chi(catalogs)
        models = get_structs(catalogs)
        groups = attach_raw_body_chi(groups, models)
    else:
        groups = group_routes(get_routes(catalogs))
        models = get_structs(catalogs)
        groups = attach_raw_body(groups, models, catalogs)
    return generate_postman(path, groups, url, port, name)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="postmangen",
        description="Generate a Postman collection from the routes in a source tree.",
    )
    parser.add_argument("url", help="base URL of the service")
    parser.add_argument("port", help="port of the service")
    parser.add_argument("path", help="root directory of the sources")
    parser.add_argument("name", help="collection name, also the output file name")
    parser.add_argument("--chi", action="store_true", help="read r.Route blocks")
    args = parser.parse_args(argv)
    try:
        start_generate(args.url, args.port, args.path, args.name, args.chi)
    except (OSError, ValueError) as error:
        print(f"postmangen: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())