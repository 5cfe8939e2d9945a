"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from vertexflow import GeometrySettings, Vector3, VertexAllocator


@pytest.fixture
def int_vector():
    """A fresh integer vector."""
    return Vector3(3, 4, 2)


@pytest.fixture
def float_vector():
    """A fresh float vector."""
    return Vector3(-1.2, 3.0, -0.5)


@pytest.fixture
def allocator():
    """VertexAllocator with range checking disabled."""
    return VertexAllocator(settings=GeometrySettings(check_position_range=False))


@pytest.fixture
def checked_allocator():
    """VertexAllocator rejecting positions outside the 64-bit range."""
    return VertexAllocator(settings=GeometrySettings(check_position_range=True))
