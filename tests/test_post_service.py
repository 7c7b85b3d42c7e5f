"""
Tests for PostService: identity, validation and owner scoping.

The identity resolver is stubbed; the store is a real SQLite database.
"""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import Err, ErrorKind, Ok, PostConsistencyError
from app.domains.posts.services import PostService
from app.domains.posts.validation import ValidationError
from tests.conftest import StubIdentityResolver, as_user

ALICE = as_user("user_alice")
BOB = as_user("user_bob")
ANONYMOUS = as_user(None)


async def _create(service, request=ALICE, title="Hello", content="World"):
    result = await service.create_post(request, title, content)
    assert isinstance(result, Ok)
    return result.value


@pytest.mark.asyncio
async def test_missing_request_is_reported(service):
    result = await service.list_posts(None)
    assert result == Err(ErrorKind.NO_REQUEST)
    assert result.message == "No request found"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.list_posts(ANONYMOUS),
        lambda s: s.get_post(ANONYMOUS, "abc"),
        lambda s: s.create_post(ANONYMOUS, "", None),
        lambda s: s.update_post(ANONYMOUS, "", "", ""),
        lambda s: s.delete_post(ANONYMOUS, "abc"),
    ],
)
async def test_every_operation_requires_identity(service, call):
    result = await call(service)
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.UNAUTHORIZED


@pytest.mark.asyncio
async def test_list_is_empty_for_new_user(service):
    result = await service.list_posts(ALICE)
    assert result == Ok([])


@pytest.mark.asyncio
async def test_list_returns_only_own_posts_newest_first(service):
    await _create(service, title="older")
    await asyncio.sleep(0.01)
    await _create(service, title="newer")
    await _create(service, request=BOB, title="bob's")

    result = await service.list_posts(ALICE)
    assert [p.title for p in result.value] == ["newer", "older"]


@pytest.mark.asyncio
async def test_create_sanitizes_and_sets_owner(service):
    post = await _create(service, title="  Hello  ", content="  World  ")

    assert post.id
    assert post.title == "Hello"
    assert post.content == "World"
    assert post.user_id == "user_alice"
    assert post.created_at == post.updated_at


@pytest.mark.asyncio
async def test_create_reports_all_field_errors(service):
    result = await service.create_post(ALICE, 7, "c" * 5001)
    assert result == Err.validation([
        ValidationError("title", "must be a string"),
        ValidationError("content", "must not exceed 5000 characters"),
    ])
    assert (await service.list_posts(ALICE)).value == []


@pytest.mark.asyncio
async def test_get_is_scoped_to_owner(service):
    post = await _create(service)

    assert await service.get_post(BOB, post.id) == Err(ErrorKind.NOT_FOUND)

    result = await service.get_post(ALICE, f"  {post.id} ")
    assert result.value.title == "Hello"
    assert result.value.content == "World"


@pytest.mark.asyncio
async def test_get_rejects_malformed_id(service):
    result = await service.get_post(ALICE, "   ")
    assert result == Err.validation([ValidationError("postId", "cannot be empty")])


@pytest.mark.asyncio
async def test_update_replaces_fields_and_refreshes_timestamp(service):
    post = await _create(service)
    await asyncio.sleep(0.01)

    result = await service.update_post(ALICE, post.id, " Updated ", "new content")

    updated = result.value
    assert updated.id == post.id
    assert updated.title == "Updated"
    assert updated.content == "new content"
    assert updated.user_id == "user_alice"
    assert updated.created_at == post.created_at
    assert updated.updated_at > post.updated_at


@pytest.mark.asyncio
async def test_update_with_empty_title_leaves_post_unchanged(service):
    post = await _create(service)

    result = await service.update_post(ALICE, post.id, "", "new content")
    assert result == Err.validation([ValidationError("title", "is required")])

    stored = (await service.get_post(ALICE, post.id)).value
    assert (stored.title, stored.content, stored.updated_at) == (
        "Hello", "World", post.updated_at
    )


@pytest.mark.asyncio
async def test_update_aggregates_field_and_id_errors(service):
    result = await service.update_post(ALICE, None, "", None)
    assert result.errors == [
        ValidationError("title", "is required"),
        ValidationError("postId", "is required"),
    ]


@pytest.mark.asyncio
async def test_update_of_foreign_post_is_not_found(service):
    post = await _create(service)

    result = await service.update_post(BOB, post.id, "Mine now", "")
    assert result == Err(ErrorKind.NOT_FOUND)
    stored = (await service.get_post(ALICE, post.id)).value
    assert (stored.title, stored.content, stored.updated_at) == (
        "Hello", "World", post.updated_at
    )


@pytest.mark.asyncio
async def test_delete_twice_reports_not_found_second_time(service):
    post = await _create(service)

    assert await service.delete_post(ALICE, post.id) == Ok({"success": True})
    assert await service.delete_post(ALICE, post.id) == Err(ErrorKind.NOT_FOUND)
    assert await service.get_post(ALICE, post.id) == Err(ErrorKind.NOT_FOUND)


@pytest.mark.asyncio
async def test_delete_of_foreign_post_is_not_found(service):
    post = await _create(service)

    assert await service.delete_post(BOB, post.id) == Err(ErrorKind.NOT_FOUND)
    stored = (await service.get_post(ALICE, post.id)).value
    assert (stored.title, stored.content, stored.updated_at) == (
        post.title, post.content, post.updated_at
    )


class VanishingRepository:
    """Reports a successful update but then finds nothing."""

    async def update_many(self, filters, values):
        return 1

    async def find_one(self, filters):
        return None


@pytest.mark.asyncio
async def test_missing_post_after_update_is_a_consistency_error():
    service = PostService(VanishingRepository(), StubIdentityResolver())
    with pytest.raises(PostConsistencyError):
        await service.update_post(ALICE, "abc", "Title", "")


class BrokenRepository:
    async def find_many(self, filters, order_by=()):
        raise OperationalError("SELECT", {}, Exception("database is locked"))


@pytest.mark.asyncio
async def test_store_failures_propagate():
    service = PostService(BrokenRepository(), StubIdentityResolver())
    with pytest.raises(OperationalError):
        await service.list_posts(ALICE)
