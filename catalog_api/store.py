"""In-memory catalog store keeping the artist and flattened album views in sync."""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Optional

from . import names
from .generator import generate_catalog
from .models import Album, AlbumNotFound, Artist, ArtistNotFound

LOGGER = logging.getLogger(__name__)


class CatalogStore:
    """Holds one catalog for the lifetime of a server.

    Albums are stored once, keyed by global album id. Dict order is insertion
    order, so that mapping doubles as the flattened album view. Each artist's
    ``albums`` list references the very same ``Album`` objects, which keeps
    both views identical in content; deletions remove the object from both.
    """

    def __init__(self, artists: Iterable[Artist], *, logger: Optional[Any] = None) -> None:
        self._logger = logger or LOGGER
        self._artists: List[Artist] = list(artists)
        self._albums: Dict[int, Album] = {}
        for artist in self._artists:
            for album in artist.albums:
                if album.global_album_id in self._albums:
                    raise ValueError(f"Duplicate global album id {album.global_album_id}")
                self._albums[album.global_album_id] = album

    @classmethod
    def generate(
        cls,
        rng: Optional[random.Random] = None,
        *,
        logger: Optional[Any] = None,
    ) -> "CatalogStore":
        """Build a store from freshly generated artists using the bundled name pools."""

        artists = generate_catalog(
            names.get_artist_names(),
            names.get_album_names(),
            rng,
            logger=logger or LOGGER,
        )
        return cls(artists, logger=logger)

    # Reads -------------------------------------------------------------------
    def list_artists(self) -> List[Artist]:
        return list(self._artists)

    def list_albums(self) -> List[Album]:
        return list(self._albums.values())

    def count_artists(self) -> int:
        return len(self._artists)

    def count_albums(self) -> int:
        return len(self._albums)

    def get_artist(self, artist_id: Optional[int]) -> Artist:
        artist = self._find_artist(artist_id)
        if artist is None:
            raise ArtistNotFound()
        return artist

    def get_artist_album(self, artist_id: Optional[int], album_or_global_id: Optional[int]) -> Album:
        """Find an artist's album by either its local or its global id."""

        artist = self.get_artist(artist_id)
        for album in artist.albums:
            if album.album_id == album_or_global_id or album.global_album_id == album_or_global_id:
                return album
        raise AlbumNotFound.for_artist(artist)

    def get_album(self, global_album_id: Optional[int]) -> Album:
        album = self._albums.get(global_album_id)
        if album is None:
            raise AlbumNotFound()
        return album

    # Deletions ---------------------------------------------------------------
    def delete_artist(self, artist_id: Optional[int]) -> Artist:
        """Remove an artist and cascade to its albums.

        The artist is resolved before anything is mutated, so a missing artist
        leaves the catalog untouched. The returned artist keeps its albums.
        """

        artist = self.get_artist(artist_id)
        self._artists.remove(artist)
        for album in artist.albums:
            flattened = self._albums.pop(album.global_album_id, None)
            self._check_same(album, flattened, view="flattened")
        self._logger.info(
            "artist_deleted artist_id=%s albums_removed=%s",
            artist.artist_id,
            len(artist.albums),
            extra={"artist_id": artist.artist_id, "albums_removed": len(artist.albums)},
        )
        return artist

    def delete_artist_album(self, artist_id: Optional[int], album_id: Optional[int]) -> Album:
        """Remove an album addressed by artist id and local album id."""

        artist = self.get_artist(artist_id)
        album = artist.find_album(album_id)
        artist.albums.remove(album)
        flattened = self._albums.pop(album.global_album_id, None)
        self._check_same(album, flattened, view="flattened")
        self._log_album_deleted(album)
        return album

    def delete_album(self, global_album_id: Optional[int]) -> Album:
        """Remove an album addressed by global id, then drop it from its owner."""

        album = self._albums.pop(global_album_id, None)
        if album is None:
            raise AlbumNotFound()

        local: Optional[Album] = None
        owner = self._find_artist(album.artist_id)
        if owner is not None:
            local = next((item for item in owner.albums if item.album_id == album.album_id), None)
            if local is not None:
                owner.albums.remove(local)
        self._check_same(album, local, view="artist")
        self._log_album_deleted(album)
        return album

    # Internal helpers ----------------------------------------------------------
    def _find_artist(self, artist_id: Optional[int]) -> Optional[Artist]:
        for artist in self._artists:
            if artist.artist_id == artist_id:
                return artist
        return None

    def _check_same(self, expected: Album, actual: Optional[Album], *, view: str) -> None:
        # Both views share album objects; anything else is a bookkeeping bug.
        if actual is expected:
            return
        found = actual.global_album_id if actual else None
        self._logger.error(
            "catalog_consistency_mismatch view=%s global_album_id=%s artist_id=%s found=%s",
            view,
            expected.global_album_id,
            expected.artist_id,
            found,
            extra={
                "view": view,
                "global_album_id": expected.global_album_id,
                "artist_id": expected.artist_id,
                "found_global_album_id": found,
            },
        )

    def _log_album_deleted(self, album: Album) -> None:
        self._logger.info(
            "album_deleted global_album_id=%s artist_id=%s",
            album.global_album_id,
            album.artist_id,
            extra={"global_album_id": album.global_album_id, "artist_id": album.artist_id},
        )
