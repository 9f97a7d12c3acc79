import asyncio

import pytest

from orchestrate import BuilderStateError, PreconditionError


def test_create_relation(db, fake) -> None:
    fake.reply(204)

    response = asyncio.run(
        db.new_graph_builder()
        .from_("users", "sjkaliski@gmail.com")
        .related("friend")
        .to("users", "byrd@bowery.io")
        .create()
    )

    assert response.status_code == 204
    assert fake.last.method == "PUT"
    assert fake.target(fake.last) == (
        "/v0/users/sjkaliski%40gmail.com/relation/friend/users/byrd%40bowery.io"
    )
    assert fake.last.content == b""


def test_remove_relation_purges(db, fake) -> None:
    fake.reply(204)

    asyncio.run(
        db.new_graph_builder()
        .from_("users", "steve")
        .related("likes")
        .to("movies", "Superbad")
        .remove()
    )

    assert fake.last.method == "DELETE"
    assert fake.target(fake.last) == "/v0/users/steve/relation/likes/movies/Superbad?purge=true"


def test_read_relations_across_hops(db, fake) -> None:
    fake.reply(200, {"count": 1, "results": [{"path": {"collection": "movies", "key": "Superbad"}}]})

    response = asyncio.run(
        db.new_graph_reader().from_("users", "steve").related("friend", "likes").get()
    )

    assert response.body["count"] == 1
    assert fake.last.method == "GET"
    assert fake.target(fake.last) == "/v0/users/steve/relations/friend/likes"


def test_write_requires_both_endpoints(db, fake) -> None:
    builder = db.new_graph_builder().from_("users", "steve").related("likes")

    with pytest.raises(PreconditionError):
        builder.create()
    assert not builder.dispatched

    fake.reply(204)
    asyncio.run(builder.to("movies", "Superbad").create())
    assert builder.dispatched


def test_write_requires_single_relation(db) -> None:
    builder = (
        db.new_graph_builder()
        .from_("users", "steve")
        .related("likes", "friend")
        .to("movies", "Superbad")
    )
    with pytest.raises(PreconditionError):
        builder.create()


def test_read_requires_from_and_relation(db, fake) -> None:
    with pytest.raises(PreconditionError):
        db.new_graph_reader().related("friend").get()
    with pytest.raises(PreconditionError):
        db.new_graph_reader().from_("users", "steve").get()
    assert fake.requests == []


def test_reader_cannot_create_or_remove(db) -> None:
    reader = db.new_graph_reader().from_("users", "steve").related("likes").to("movies", "x")
    with pytest.raises(BuilderStateError):
        reader.create()
    with pytest.raises(BuilderStateError):
        reader.remove()


def test_writer_cannot_get(db) -> None:
    with pytest.raises(BuilderStateError):
        db.new_graph_builder().from_("users", "steve").related("likes").get()


def test_second_terminal_call_is_rejected(db, fake) -> None:
    fake.reply(204)
    builder = db.new_graph_builder().from_("users", "a").related("r").to("users", "b")

    asyncio.run(builder.create())

    with pytest.raises(BuilderStateError):
        builder.remove()
    with pytest.raises(BuilderStateError):
        builder.related("other")
    assert len(fake.requests) == 1


def test_empty_relation_names_are_rejected(db) -> None:
    with pytest.raises(PreconditionError):
        db.new_graph_builder().related()
    with pytest.raises(PreconditionError):
        db.new_graph_builder().related("likes", "")
