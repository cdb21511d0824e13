"""
Shared pytest fixtures for bloglist tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from bloglist.core.security import hash_password
from bloglist.di.base_container import BaseContainer
from bloglist.di.container import register_use_cases
from bloglist.domain.models.blog import Blog
from bloglist.domain.models.user import User
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.user_repository import UserRepository
from bloglist.main import create_application

from .fakes import INITIAL_BLOGS, InMemoryBlogRepository, InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "APP_ENV": "test",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "bloglist",
        "TEST_MONGO_DB_NAME": "bloglist_test",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.app_env = "test"
    mock.is_test = True
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.database_name = "bloglist_test"
    mock.bcrypt_rounds = 4
    mock.log_level = "WARNING"
    mock.cors_origins = ["*"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("bloglist.core.config.get_settings", return_value=mock), patch(
        "bloglist.core.security.get_settings", return_value=mock
    ), patch("bloglist.main.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def blog_repository():
    """In-memory blog repository seeded with the two initial blogs."""
    repository = InMemoryBlogRepository()
    for blog in INITIAL_BLOGS:
        stored = Blog(id=None, **blog)
        stored.id = f"{len(repository.blogs) + 1:024x}"
        repository.blogs[stored.id] = stored
    return repository


@pytest.fixture
def user_repository():
    """In-memory user repository seeded with user 'root' (password 'sekret')."""
    repository = InMemoryUserRepository()
    repository.users["root"] = User(
        id="f" * 24,
        username="root",
        password_hash=hash_password("sekret"),
    )
    return repository


@pytest.fixture
def container(blog_repository, user_repository):
    """Container wiring the real use cases to the in-memory repositories."""
    test_container = BaseContainer()
    test_container.register_singleton(BlogRepository, blog_repository)
    test_container.register_singleton(UserRepository, user_repository)
    register_use_cases(test_container)
    return test_container


@pytest.fixture
def client(container, mock_settings):
    """Test client for an app built around the injected container (no MongoDB)."""
    app = create_application(container=container)
    with TestClient(app) as c:
        yield c
