"""Domain models and errors for the mock catalog."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


class CatalogError(Exception):
    """Base error for catalog lookups, carrying an HTTP-friendly status."""

    status_code = 404

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ArtistNotFound(CatalogError):
    def __init__(self, message: str = "Artist not found") -> None:
        super().__init__(message)


class AlbumNotFound(CatalogError):
    def __init__(self, message: str = "Album not found") -> None:
        super().__init__(message)

    @classmethod
    def for_artist(cls, artist: "Artist") -> "AlbumNotFound":
        return cls(f"Album not found for this {artist.name}")


class AlbumPoolExhausted(CatalogError):
    """Raised at generation time when the name pools cannot fill the catalog."""

    status_code = 500


@dataclass(eq=False)
class Album:
    """A single album; owned by one artist and listed in the flattened view."""

    album_id: int
    global_album_id: int
    name: str
    image_seed: float
    artist_name: str
    artist_id: int
    record_label: str
    publication_year: int
    albums_sold: int
    certification: str
    number_of_singles: int
    number_of_tracks: int
    available_on_streaming: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "albumId": self.album_id,
            "globalAlbumId": self.global_album_id,
            "albumName": self.name,
            "albumImageRandNum": self.image_seed,
            "artistName": self.artist_name,
            "artistId": self.artist_id,
            "recordLabel": self.record_label,
            "publicationYear": self.publication_year,
            "albumsSold": self.albums_sold,
            "certification": self.certification,
            "numberOfSingles": self.number_of_singles,
            "numberOfTracks": self.number_of_tracks,
            "availableOnStreaming": self.available_on_streaming,
        }


@dataclass(eq=False)
class Artist:
    """An artist and the ordered albums it owns."""

    artist_id: int
    name: str
    image_seed: float
    year_started: int
    number_of_members: int
    country_of_origin: str
    is_touring: bool
    albums: List[Album] = field(default_factory=list)

    @property
    def is_group(self) -> bool:
        return self.number_of_members > 1

    @property
    def number_of_albums_released(self) -> int:
        # derived so it cannot drift from the album list
        return len(self.albums)

    def find_album(self, album_id: int) -> Album:
        """Return the album with this local id, or raise ``AlbumNotFound``."""

        for album in self.albums:
            if album.album_id == album_id:
                return album
        raise AlbumNotFound.for_artist(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "artistId": self.artist_id,
            "artistName": self.name,
            "artistImageRandNum": self.image_seed,
            "yearStarted": self.year_started,
            "numberOfMembers": self.number_of_members,
            "isGroup": self.is_group,
            "countryOfOrigin": self.country_of_origin,
            "isTouring": self.is_touring,
            "numberOfAlbumsReleased": self.number_of_albums_released,
            "albums": [album.to_dict() for album in self.albums],
        }
