import random

import pytest

from catalog_api.api_server import create_app
from catalog_api.env import Settings
from catalog_api.store import CatalogStore


@pytest.fixture
def store():
    return CatalogStore.generate(random.Random(1234))


@pytest.fixture
def client(store, tmp_path):
    (tmp_path / "0.123456.jpg").write_bytes(b"cover")
    settings = Settings(static_dir=str(tmp_path), cors_origin="http://localhost:4200")
    app = create_app(store, settings)
    app.config.update(TESTING=True)
    return app.test_client()


def test_list_artists_and_count(client):
    response = client.get("/artists")
    assert response.status_code == 200
    artists = response.get_json()
    assert len(artists) == 30
    assert list(artists[0])[:3] == ["artistId", "artistName", "artistImageRandNum"]

    count = client.get("/artists/number").get_json()
    assert count == {"numberOfArtists": 30}


def test_list_albums_and_count(client, store):
    albums = client.get("/albums").get_json()
    assert len(albums) == store.count_albums()
    assert client.get("/albums/number").get_json() == {"numberOfAlbums": len(albums)}
    assert sum(artist["numberOfAlbumsReleased"] for artist in client.get("/artists").get_json()) == len(albums)


def test_get_artist_and_not_found(client):
    artist = client.get("/artists/3").get_json()
    assert artist["artistId"] == 3
    assert artist["numberOfAlbumsReleased"] == len(artist["albums"])

    response = client.get("/artists/31")
    assert response.status_code == 404
    assert response.get_json() == {"message": "Artist not found"}


def test_non_numeric_ids_degrade_to_not_found(client):
    assert client.get("/artists/abc").status_code == 404
    assert client.get("/albums/xyz").status_code == 404
    assert client.delete("/albums/xyz").status_code == 404
    assert client.get("/artists/\u0661").status_code == 404


def test_trailing_junk_is_ignored_like_parseint(client):
    response = client.get("/artists/2abc")
    assert response.status_code == 200
    assert response.get_json()["artistId"] == 2


def test_get_first_album_of_first_artist(client):
    response = client.get("/artists/1/1")
    assert response.status_code == 200
    album = response.get_json()
    assert album["albumId"] == 1
    assert album["artistId"] == 1


def test_missing_artist_album_names_the_artist(client, store):
    artist = store.get_artist(7)
    owned = {album.album_id for album in artist.albums} | {
        album.global_album_id for album in artist.albums
    }
    missing = next(value for value in range(42, 1000) if value not in owned)

    response = client.get(f"/artists/7/{missing}")

    assert response.status_code == 404
    assert response.get_json() == {"message": f"Album not found for this {artist.name}"}
    assert client.get("/artists/99/1").get_json() == {"message": "Artist not found"}


def test_get_album_by_global_id(client):
    album = client.get("/albums/12").get_json()
    assert album["globalAlbumId"] == 12
    response = client.get("/albums/999999")
    assert response.status_code == 404
    assert response.get_json() == {"message": "Album not found"}


def test_reads_are_idempotent(client):
    assert client.get("/artists").get_json() == client.get("/artists").get_json()
    assert client.get("/albums/5").get_json() == client.get("/albums/5").get_json()


def test_delete_artist_cascades(client):
    before = client.get("/artists/5").get_json()
    total_before = len(client.get("/albums").get_json())

    response = client.delete("/artists/5")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["deletionType"] == "artist"
    assert payload["deleted"] is True
    assert payload["artist"]["artistId"] == 5
    assert len(payload["artist"]["albums"]) == before["numberOfAlbumsReleased"]
    assert before["artistName"] in payload["message"]

    assert client.get("/artists/5").status_code == 404
    assert len(client.get("/albums").get_json()) == total_before - before["numberOfAlbumsReleased"]
    assert client.get("/artists/number").get_json() == {"numberOfArtists": 29}
    assert client.delete("/artists/5").status_code == 404


def test_delete_artist_album(client):
    artist = client.get("/artists/4").get_json()
    target = artist["albums"][0]

    response = client.delete(f"/artists/4/{target['albumId']}")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["deletionType"] == "album"
    assert payload["deleted"] is True
    assert payload["album"] == target
    assert client.get(f"/albums/{target['globalAlbumId']}").status_code == 404
    after = client.get("/artists/4").get_json()
    assert after["numberOfAlbumsReleased"] == artist["numberOfAlbumsReleased"] - 1
    assert client.delete(f"/artists/4/{target['albumId']}").status_code == 404


def test_delete_album_by_global_id(client):
    album = client.get("/albums/20").get_json()
    owner_before = client.get(f"/artists/{album['artistId']}").get_json()

    response = client.delete("/albums/20")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["deletionType"] == "album"
    assert payload["album"]["globalAlbumId"] == 20
    owner_after = client.get(f"/artists/{album['artistId']}").get_json()
    assert owner_after["numberOfAlbumsReleased"] == owner_before["numberOfAlbumsReleased"] - 1
    assert 20 not in [item["globalAlbumId"] for item in owner_after["albums"]]


def test_delete_unknown_album_leaves_catalog_unchanged(client):
    before = client.get("/albums").get_json()
    response = client.delete("/albums/999999")
    assert response.status_code == 404
    assert response.get_json() == {"message": "Album not found"}
    assert client.get("/albums").get_json() == before


def test_cors_allows_configured_origin_only(client):
    allowed = client.get("/artists/number", headers={"Origin": "http://localhost:4200"})
    assert allowed.headers["Access-Control-Allow-Origin"] == "http://localhost:4200"

    denied = client.get("/artists/number", headers={"Origin": "http://evil.example"})
    assert "Access-Control-Allow-Origin" not in denied.headers


def test_cors_preflight_lists_methods(client):
    response = client.options(
        "/albums/1",
        headers={
            "Origin": "http://localhost:4200",
            "Access-Control-Request-Method": "DELETE",
        },
    )
    assert "DELETE" in response.headers["Access-Control-Allow-Methods"]


def test_static_cover_art_is_served(client):
    response = client.get("/0.123456.jpg")
    assert response.status_code == 200
    assert response.data == b"cover"


def test_health_reports_counts(client, store):
    payload = client.get("/health").get_json()
    assert payload["status"] == "healthy"
    assert payload["artists"] == 30
    assert payload["albums"] == store.count_albums()


def test_create_app_generates_catalog_from_seed(tmp_path):
    settings = Settings(static_dir=str(tmp_path), seed=77)
    first = create_app(settings=settings).test_client().get("/artists").get_json()
    second = create_app(settings=settings).test_client().get("/artists").get_json()
    assert first == second
