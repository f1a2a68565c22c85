#!/usr/bin/env python3
"""Serve the mock catalog API, or dump a generated catalog as JSON."""
from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Iterable

from catalog_api import env
from catalog_api.api_server import create_app
from catalog_api.models import CatalogError
from catalog_api.store import CatalogStore

LOGGER = logging.getLogger("catalog_api")


def parse_args(argv: Iterable[str], settings: env.Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a random artist/album catalog and serve it over HTTP.",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Address to bind (default: {settings.host}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Seed the generator for a reproducible catalog.",
    )
    parser.add_argument(
        "--dump",
        type=Path,
        help="Write the generated catalog to this JSON file and exit instead of serving.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run the Flask development server in debug mode.",
    )
    return parser.parse_args(list(argv))


def main(argv: Iterable[str]) -> int:
    env.load_env()
    try:
        settings = env.load_settings()
    except RuntimeError as exc:
        print(f"Environment not configured correctly: {exc}", file=sys.stderr)
        return 1

    args = parse_args(argv, settings)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        store = CatalogStore.generate(rng)
    except CatalogError as exc:
        print(f"Catalog generation failed: {exc}", file=sys.stderr)
        return 1

    if args.dump:
        args.dump.write_text(
            json.dumps([artist.to_dict() for artist in store.list_artists()], indent=2)
        )
        print(f"Wrote {store.count_artists()} artists and {store.count_albums()} albums to {args.dump}")
        return 0

    settings.host = args.host
    settings.port = args.port
    app = create_app(store, settings)
    LOGGER.info("Test Catalog server running on http://%s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
