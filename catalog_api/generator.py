"""Catalog generation pipeline."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from . import config, models, utils


@dataclass
class GenerationContext:
    rng: random.Random
    album_names: List[str]
    next_global_id: int = 1

    def take_album_name(self) -> str:
        return self.album_names[self.next_global_id - 1]


def generate_catalog(
    artist_names: Sequence[str],
    album_names: Sequence[str],
    rng: Optional[random.Random] = None,
    *,
    logger: Optional[Any] = None,
) -> List[models.Artist]:
    """Generate the artists, and their albums, that seed a catalog.

    Artist names are used by position. The album pool is shuffled once and
    consumed in order, so global album ids follow consumption order.
    """

    _check_pools(artist_names, album_names)
    rng = rng or random.Random()
    context = GenerationContext(rng=rng, album_names=shuffle_names(album_names, rng))

    artists = [
        _build_artist(artist_id, artist_names[artist_id - 1], context)
        for artist_id in range(1, config.ARTIST_COUNT + 1)
    ]

    if logger:
        logger.debug(
            "catalog_generation_complete artists=%s albums=%s",
            len(artists),
            context.next_global_id - 1,
            extra={
                "artists": len(artists),
                "albums": context.next_global_id - 1,
            },
        )
    return artists


def shuffle_names(names: Sequence[str], rng: random.Random) -> List[str]:
    """Uniform permutation: repeatedly pick a random remaining name and remove it."""

    remaining = list(names)
    shuffled: List[str] = []
    while remaining:
        shuffled.append(remaining.pop(rng.randrange(len(remaining))))
    return shuffled


def draw_sales(certification: str, rng: random.Random) -> int:
    minimum, spread = config.SALES_RANGES[certification]
    return minimum + rng.randrange(spread)


def _check_pools(artist_names: Sequence[str], album_names: Sequence[str]) -> None:
    if len(artist_names) < config.ARTIST_COUNT:
        raise models.AlbumPoolExhausted(
            f"Need {config.ARTIST_COUNT} artist names, got {len(artist_names)}"
        )
    if len(album_names) < config.MAX_TOTAL_ALBUMS:
        raise models.AlbumPoolExhausted(
            f"Need at least {config.MAX_TOTAL_ALBUMS} album names, got {len(album_names)}"
        )


def _build_artist(artist_id: int, artist_name: str, context: GenerationContext) -> models.Artist:
    rng = context.rng
    album_count = rng.randint(config.MIN_ALBUMS_PER_ARTIST, config.MAX_ALBUMS_PER_ARTIST)
    albums = [
        _build_album(album_id, artist_id, artist_name, context)
        for album_id in range(1, album_count + 1)
    ]
    return models.Artist(
        artist_id=artist_id,
        name=artist_name,
        image_seed=utils.image_seed(rng),
        year_started=utils.randint_inclusive(rng, config.YEAR_STARTED_RANGE),
        number_of_members=utils.randint_inclusive(rng, config.MEMBERS_RANGE),
        country_of_origin=rng.choice(config.COUNTRIES),
        is_touring=rng.random() < config.TOURING_PROBABILITY,
        albums=albums,
    )


def _build_album(
    album_id: int,
    artist_id: int,
    artist_name: str,
    context: GenerationContext,
) -> models.Album:
    rng = context.rng
    name = context.take_album_name()
    global_album_id = context.next_global_id
    context.next_global_id += 1

    certification = rng.choice(config.CERTIFICATIONS)
    return models.Album(
        album_id=album_id,
        global_album_id=global_album_id,
        name=name,
        image_seed=utils.image_seed(rng),
        artist_name=artist_name,
        artist_id=artist_id,
        record_label=rng.choice(config.RECORD_LABELS),
        publication_year=utils.randint_inclusive(rng, config.PUBLICATION_YEAR_RANGE),
        albums_sold=draw_sales(certification, rng),
        certification=certification,
        number_of_singles=utils.randint_inclusive(rng, config.SINGLES_RANGE),
        number_of_tracks=utils.randint_inclusive(rng, config.TRACKS_RANGE),
        available_on_streaming=rng.random() < config.STREAMING_PROBABILITY,
    )
