"""
Unit tests for MongoBlogRepository against a mocked Motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from bloglist.core.exceptions import PersistenceError
from bloglist.domain.models.blog import Blog
from bloglist.infrastructure.db.mongo_blog_repository import MongoBlogRepository


class _AsyncCursor:
    """Stand-in for a Motor cursor: sortable and async-iterable."""

    def __init__(self, documents):
        self._documents = list(documents)
        self.sort_args = None

    def sort(self, *args):
        self.sort_args = args
        return self

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._documents:
            raise StopAsyncIteration
        return self._documents.pop(0)


def _document(object_id: ObjectId, **fields):
    document = {"_id": object_id, "title": "Blog 1", "author": "Juan", "url": "sinUrl", "likes": 10}
    document.update(fields)
    return document


@pytest.fixture
def collection():
    return AsyncMock()


@pytest.fixture
def repository(collection):
    return MongoBlogRepository(blog_collection=collection)


class TestFindAll:
    @pytest.mark.asyncio
    async def test_maps_documents_and_sorts_by_insertion(self, repository, collection):
        first, second = ObjectId(), ObjectId()
        cursor = _AsyncCursor([_document(first), _document(second, title="Blog 2", likes=None)])
        collection.find = MagicMock(return_value=cursor)

        blogs = await repository.find_all()

        collection.find.assert_called_once_with({})
        assert cursor.sort_args == ("_id", ASCENDING)
        assert [blog.id for blog in blogs] == [str(first), str(second)]
        assert blogs[1].likes == 0

    @pytest.mark.asyncio
    async def test_empty_collection(self, repository, collection):
        collection.find = MagicMock(return_value=_AsyncCursor([]))
        assert await repository.find_all() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "url"])
    async def test_corrupt_document_is_persistence_error(self, repository, collection, missing):
        document = _document(ObjectId())
        del document[missing]
        collection.find = MagicMock(return_value=_AsyncCursor([document]))
        with pytest.raises(PersistenceError, match="Invalid blog document"):
            await repository.find_all()

    @pytest.mark.asyncio
    async def test_driver_error_becomes_persistence_error(self, repository, collection):
        collection.find = MagicMock(side_effect=PyMongoError("boom"))
        with pytest.raises(PersistenceError, match="Error listing blogs"):
            await repository.find_all()


class TestFindById:
    @pytest.mark.asyncio
    async def test_found(self, repository, collection):
        object_id = ObjectId()
        collection.find_one.return_value = _document(object_id)
        blog = await repository.find_by_id(str(object_id))
        collection.find_one.assert_called_once_with({"_id": object_id})
        assert blog.id == str(object_id)
        assert blog.title == "Blog 1"

    @pytest.mark.asyncio
    async def test_missing(self, repository, collection):
        collection.find_one.return_value = None
        assert await repository.find_by_id(str(ObjectId())) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", ["", "not-an-object-id", "123"])
    async def test_malformed_id_is_not_found(self, repository, collection, blog_id):
        assert await repository.find_by_id(blog_id) is None
        collection.find_one.assert_not_called()


class TestCreate:
    @pytest.mark.asyncio
    async def test_inserts_without_id_and_returns_stored(self, repository, collection):
        object_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=object_id)
        collection.find_one.return_value = _document(object_id, title="Blog New", likes=0)

        blog = await repository.create(Blog(id=None, title="Blog New", author="Juan", url="sinUrl"))

        inserted = collection.insert_one.call_args.args[0]
        assert "_id" not in inserted and "id" not in inserted
        assert inserted["likes"] == 0
        assert blog.id == str(object_id)
        assert blog.title == "Blog New"

    @pytest.mark.asyncio
    async def test_driver_error_becomes_persistence_error(self, repository, collection):
        collection.insert_one.side_effect = PyMongoError("write failed")
        with pytest.raises(PersistenceError):
            await repository.create(Blog(id=None, title="t", url="u"))


class TestUpdate:
    @pytest.mark.asyncio
    async def test_sets_fields_and_returns_new_document(self, repository, collection):
        object_id = ObjectId()
        collection.find_one_and_update.return_value = _document(object_id, likes=50)

        blog = await repository.update(str(object_id), {"likes": 50, "id": "ignored"})

        collection.find_one_and_update.assert_called_once_with(
            {"_id": object_id},
            {"$set": {"likes": 50}},
            return_document=ReturnDocument.AFTER,
        )
        assert blog.likes == 50

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, repository, collection):
        collection.find_one_and_update.return_value = None
        assert await repository.update(str(ObjectId()), {"likes": 1}) is None

    @pytest.mark.asyncio
    async def test_malformed_id_returns_none(self, repository, collection):
        assert await repository.update("nope", {"likes": 1}) is None
        collection.find_one_and_update.assert_not_called()


class TestDelete:
    @pytest.mark.asyncio
    async def test_existing(self, repository, collection):
        object_id = ObjectId()
        collection.delete_one.return_value = MagicMock(deleted_count=1)
        assert await repository.delete(str(object_id)) is True
        collection.delete_one.assert_called_once_with({"_id": object_id})

    @pytest.mark.asyncio
    async def test_missing(self, repository, collection):
        collection.delete_one.return_value = MagicMock(deleted_count=0)
        assert await repository.delete(str(ObjectId())) is False

    @pytest.mark.asyncio
    async def test_malformed_id_deletes_nothing(self, repository, collection):
        assert await repository.delete("nope") is False
        collection.delete_one.assert_not_called()
