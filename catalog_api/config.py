"""Catalog configuration constants for generation and serving."""
from __future__ import annotations

# Catalog shape
ARTIST_COUNT: int = 30
MIN_ALBUMS_PER_ARTIST: int = 2
MAX_ALBUMS_PER_ARTIST: int = 10
MAX_TOTAL_ALBUMS: int = ARTIST_COUNT * MAX_ALBUMS_PER_ARTIST

# Certification tiers, drawn uniformly
CERTIFICATIONS = [
    "None",
    "Silver",
    "Gold",
    "Platinum",
    "Multi-Platinum",
    "Diamond",
]

# Certification -> (minimum sales, random range width)
SALES_RANGES = {
    "None": (25_000, 175_000),
    "Silver": (210_050, 289_950),
    "Gold": (555_825, 444_175),
    "Platinum": (1_000_600, 999_400),
    "Multi-Platinum": (2_108_775, 7_891_225),
    "Diamond": (10_564_800, 18_000_000),
}

RECORD_LABELS = [
    "Northwind Records",
    "Blue Horizon",
    "Sunburst Music",
    "Iron Gate",
    "CrystalTone",
    "Crazy Music",
    "In Our Lifetime",
    "Trailblazer Inc",
    "Down for the Cause Records",
]

COUNTRIES = [
    "USA",
    "UK",
    "Canada",
    "Australia",
    "Germany",
    "Sweden",
    "Brazil",
    "South Africa",
    "Nigeria",
    "South Korea",
    "Japan",
    "India",
]

# Attribute ranges, inclusive on both ends
YEAR_STARTED_RANGE = (1970, 2019)
PUBLICATION_YEAR_RANGE = (1990, 2023)
MEMBERS_RANGE = (1, 5)
SINGLES_RANGE = (1, 6)
TRACKS_RANGE = (8, 15)

TOURING_PROBABILITY: float = 0.5
STREAMING_PROBABILITY: float = 0.9
IMAGE_SEED_DECIMALS: int = 6

# Server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT: int = 3000
DEFAULT_CORS_ORIGIN = "http://localhost:4200"
DEFAULT_STATIC_DIR = "public"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]
