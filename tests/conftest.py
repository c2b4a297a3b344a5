"""
Pytest fixtures and configuration for HomeLedger tests.

This module provides common fixtures used across all test modules,
including the in-memory store, the test client and a GraphQL helper.
"""

import os

# Cheap hashing and no file-backed database while testing.
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from typing import Generator

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from homeledger.main import app
from homeledger.db import Base, Store, get_store, make_engine, make_sessionmaker
from homeledger.models.user import User


# Test password used by the test_user fixture
TEST_PASSWORD = "testpassword123"

engine = make_engine("sqlite:///:memory:", poolclass=StaticPool)
TestingSessionLocal = make_sessionmaker(engine)


@pytest.fixture(scope="function")
def store() -> Generator[Store, None, None]:
    """
    Create a fresh store for each test.

    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=engine)
    try:
        yield Store(TestingSessionLocal)
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(store: Store) -> Generator[TestClient, None, None]:
    """
    Create a test client with overridden store dependency.
    """
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def graphql(client: TestClient):
    """
    POST a GraphQL document and return the decoded response body.
    """
    def execute(query: str, variables: dict = None) -> dict:
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200
        return response.json()
    return execute


@pytest.fixture
def test_user(store: Store) -> User:
    """
    Create a test user in the database.
    """
    return store.users.create("testuser", TEST_PASSWORD)


@pytest.fixture
def other_user(store: Store) -> User:
    return store.users.create("otheruser", "otherpassword456")
