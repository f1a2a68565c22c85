"""
Static name pools for the mock catalog.
Artist names are consumed by position; album names are shuffled before use.
"""

# Ordered; artist N gets ARTIST_NAMES[N - 1]
ARTIST_NAMES = [
    "Velvet Static",
    "The Paper Lanterns",
    "Marlowe Kane",
    "Neon Harbor",
    "Ashgrove",
    "Juniper Wells",
    "The Hollow Pines",
    "Sable & The Tides",
    "Kestrel Moon",
    "Orchid Machine",
    "Dusty Ferreira",
    "Glass Atlas",
    "The Midnight Ferry",
    "Ruby Alvarez",
    "Copperline",
    "Silent Orbit",
    "Wren Halloway",
    "The Lowland Choir",
    "Bright Fever",
    "Iris Tanaka",
    "Northbound Kids",
    "Solenne",
    "The Grey Cartographers",
    "Otis Blackwood",
    "Paper Tigers Club",
    "Luna Okafor",
    "Cinder Road",
    "The Quiet Engines",
    "Harlow Finch",
    "Electric Meadow",
]

_ALBUM_ADJECTIVES = [
    "Golden",
    "Broken",
    "Silver",
    "Endless",
    "Crimson",
    "Hidden",
    "Electric",
    "Distant",
    "Wild",
    "Silent",
    "Burning",
    "Frozen",
    "Restless",
    "Velvet",
    "Hollow",
    "Midnight",
    "Paper",
    "Neon",
    "Lonely",
    "Northern",
]

_ALBUM_NOUNS = [
    "Skies",
    "Rivers",
    "Echoes",
    "Gardens",
    "Highways",
    "Hearts",
    "Signals",
    "Shadows",
    "Tides",
    "Cities",
    "Dreams",
    "Horizons",
    "Mirrors",
    "Lanterns",
    "Seasons",
    "Storms",
]

# 320 distinct names, enough for the worst case of 30 artists x 10 albums
ALBUM_NAMES = [f"{adjective} {noun}" for noun in _ALBUM_NOUNS for adjective in _ALBUM_ADJECTIVES]


def get_artist_names():
    """
    Return the artist names as a fresh list.

    Returns:
        list: Artist names in catalog order
    """
    return list(ARTIST_NAMES)


def get_album_names():
    """
    Return the album name pool as a fresh list.

    Returns:
        list: Album names in their static order
    """
    return list(ALBUM_NAMES)
