"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest
from graphql import GraphQLSchema, build_schema

SCENARIO_SDL: str = """
type Query {
  user: User
}

type User {
  name: String
  friends: [User]
}
"""


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def workspace_root(fixtures_root: Path) -> Path:
    """Return the fixture workspace with a schema and query documents."""
    return fixtures_root / "workspace"


@pytest.fixture(scope="session")
def schema(fixtures_root: Path) -> GraphQLSchema:
    """Return the main fixture schema (interfaces, unions, inputs, directives)."""
    return build_schema((fixtures_root / "schema.graphql").read_text(encoding="utf-8"))


@pytest.fixture(scope="session")
def scenario_schema() -> GraphQLSchema:
    """Return the minimal ``Query { user }`` / ``User { name friends }`` schema."""
    return build_schema(SCENARIO_SDL)
