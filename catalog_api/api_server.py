"""Flask API serving the generated catalog to the frontend."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify
from flask_cors import CORS

from . import config
from .env import Settings, load_settings
from .models import CatalogError
from .store import CatalogStore
from .utils import parse_id

LOGGER = logging.getLogger(__name__)
STORE_KEY = "catalog_store"

catalog = Blueprint("catalog", __name__)


def _store() -> CatalogStore:
    return current_app.extensions[STORE_KEY]


@catalog.app_errorhandler(CatalogError)
def handle_catalog_error(exc: CatalogError):
    return jsonify({"message": exc.message}), exc.status_code


@catalog.route("/artists", methods=["GET"])
def list_artists():
    return jsonify([artist.to_dict() for artist in _store().list_artists()])


@catalog.route("/artists/number", methods=["GET"])
def count_artists():
    return jsonify({"numberOfArtists": _store().count_artists()})


@catalog.route("/artists/<artist_id>", methods=["GET"])
def get_artist(artist_id: str):
    artist = _store().get_artist(parse_id(artist_id))
    return jsonify(artist.to_dict())


@catalog.route("/artists/<artist_id>/<album_id>", methods=["GET"])
def get_artist_album(artist_id: str, album_id: str):
    album = _store().get_artist_album(parse_id(artist_id), parse_id(album_id))
    return jsonify(album.to_dict())


@catalog.route("/albums", methods=["GET"])
def list_albums():
    return jsonify([album.to_dict() for album in _store().list_albums()])


@catalog.route("/albums/number", methods=["GET"])
def count_albums():
    return jsonify({"numberOfAlbums": _store().count_albums()})


@catalog.route("/albums/<global_album_id>", methods=["GET"])
def get_album(global_album_id: str):
    album = _store().get_album(parse_id(global_album_id))
    return jsonify(album.to_dict())


@catalog.route("/artists/<artist_id>", methods=["DELETE"])
def delete_artist(artist_id: str):
    artist = _store().delete_artist(parse_id(artist_id))
    return jsonify({
        "message": f"Artist {artist.name} deleted",
        "deletionType": "artist",
        "deleted": True,
        "artist": artist.to_dict(),
    })


@catalog.route("/artists/<artist_id>/<album_id>", methods=["DELETE"])
def delete_artist_album(artist_id: str, album_id: str):
    album = _store().delete_artist_album(parse_id(artist_id), parse_id(album_id))
    return _album_deleted(album)


@catalog.route("/albums/<global_album_id>", methods=["DELETE"])
def delete_album(global_album_id: str):
    album = _store().delete_album(parse_id(global_album_id))
    return _album_deleted(album)


@catalog.route("/health", methods=["GET"])
def health_check():
    store = _store()
    return jsonify({
        "status": "healthy",
        "message": "Catalog API server is running",
        "artists": store.count_artists(),
        "albums": store.count_albums(),
    })


def _album_deleted(album):
    return jsonify({
        "message": f"Album {album.name} by {album.artist_name} deleted",
        "deletionType": "album",
        "deleted": True,
        "album": album.to_dict(),
    })


def create_app(
    store: Optional[CatalogStore] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    """Build the Flask app around a catalog store.

    Without an explicit store a new catalog is generated, seeded from
    ``settings.seed`` when one is configured.
    """

    settings = settings or load_settings()
    if store is None:
        rng = random.Random(settings.seed) if settings.seed is not None else None
        store = CatalogStore.generate(rng)

    static_dir = Path(settings.static_dir).resolve()
    app = Flask(__name__, static_folder=str(static_dir), static_url_path="")
    app.json.sort_keys = False
    app.extensions[STORE_KEY] = store
    CORS(
        app,
        origins=[settings.cors_origin],
        methods=config.CORS_METHODS,
        allow_headers=config.CORS_HEADERS,
    )
    app.register_blueprint(catalog)
    LOGGER.info(
        "catalog_app_ready artists=%s albums=%s",
        store.count_artists(),
        store.count_albums(),
        extra={"artists": store.count_artists(), "albums": store.count_albums()},
    )
    return app

