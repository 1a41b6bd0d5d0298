from __future__ import annotations

import pytest

from albumapi.core import Album, AlbumNotFoundError, AlbumRegistry
from albumapi.runtime import AlbumServer, Settings, run

_QUIET = Settings(host="127.0.0.1", port=0, log_level="warning", access_log=False)


def test_run_starts_server_on_free_port() -> None:
    server = run(settings=_QUIET)

    assert isinstance(server, AlbumServer)
    assert server.port != 0
    assert server.url == f"http://127.0.0.1:{server.port}"
    assert server.client().health() is True


def test_client_round_trip_against_live_server() -> None:
    server = run(settings=_QUIET)
    client = server.client()

    assert [a.id for a in client.list_albums()] == ["1", "2", "3"]
    assert client.get_album("1").title == "Blue Train"

    created = client.create_album(Album(id="4", title="Betty", artist="Betty Carter", price=49.99))
    assert created == Album(id="4", title="Betty", artist="Betty Carter", price=49.99)
    assert server.registry.get_album("4") == created

    echoed = client.update_album("4", title="The Modern Sound of Betty Carter", price=0.0)
    assert echoed.id == ""
    assert client.get_album("4").price == 49.99
    assert client.get_album("4").title == "The Modern Sound of Betty Carter"

    replaced = client.replace_album("4", Album(id="4", title="Other", artist="Other", price=1.5))
    assert client.get_album("4") == replaced

    client.delete_album("4")
    with pytest.raises(AlbumNotFoundError):
        client.get_album("4")
    with pytest.raises(AlbumNotFoundError):
        client.delete_album("4")


def test_client_raises_runtime_error_on_bad_request() -> None:
    server = run(settings=_QUIET)
    client = server.client()

    with pytest.raises(RuntimeError):
        client._request("POST", "/albums", json={"price": "free"})


def test_servers_have_independent_registries() -> None:
    s1 = run(settings=_QUIET)
    s2 = run(settings=_QUIET)

    s1.client().delete_album("1")

    assert s1.registry.count() == 2
    assert s2.registry.count() == 3


def test_client_handles_ids_with_reserved_characters() -> None:
    server = run(settings=_QUIET)
    client = server.client()
    odd_id = "a/b?c#d%e f"

    client.create_album(Album(id=odd_id, title="Odd", artist="X", price=3.0))

    assert client.get_album(odd_id).title == "Odd"
    client.update_album(odd_id, artist="Y")
    assert server.registry.get_album(odd_id).artist == "Y"
    client.delete_album(odd_id)
    with pytest.raises(AlbumNotFoundError):
        client.get_album(odd_id)


def test_run_fails_when_port_is_taken() -> None:
    s1 = run(settings=_QUIET)

    with pytest.raises(RuntimeError):
        run(port=s1.port, settings=_QUIET)

    assert s1.client().health() is True


def test_run_serves_the_registry_it_returns() -> None:
    shared = AlbumRegistry(albums=())
    server = run(registry=shared, settings=_QUIET)

    assert server.registry is shared
    server.client().create_album(Album(id="only-here"))
    assert shared.get_album("only-here").id == "only-here"

    unseeded = run(settings=Settings(host="127.0.0.1", port=0, log_level="warning", access_log=False, seed=False))
    assert unseeded.registry.count() == 0
    assert unseeded.client().list_albums() == []
