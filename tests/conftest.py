"""Shared pytest fixtures for dosatag tests."""

import uuid
from datetime import datetime
from typing import Optional

import pytest

from dosatag.keys.parser import KeyExpressionParser
from dosatag.schema import FieldSpec


@pytest.fixture(scope="session")
def key_parser() -> KeyExpressionParser:
    """Key expression parser shared by the whole test session."""
    return KeyExpressionParser()


@pytest.fixture
def user_fields() -> list:
    """(FieldSpec, tag) pairs of a small user record."""
    return [
        (FieldSpec("org", uuid.UUID), ""),
        (FieldSpec("user_id", str), "name=id"),
        (FieldSpec("created", datetime), ""),
        (FieldSpec("email", Optional[str]), ""),
        (FieldSpec("age", int), ""),
    ]
