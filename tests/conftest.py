"""Shared fixtures for leatherpattern tests."""

import logging

import pytest
import structlog

from leatherpattern.domain import (
    EdgeRange,
    EdgeStitch,
    Extension,
    Node,
    PatternDocument,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Give every test the default structlog setup and no package handlers."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("leatherpattern")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def half_nodes() -> list[Node]:
    """Right half of an 80 x 100 rectangle, both ends on the fold line."""
    return [Node(0, -50), Node(40, -50), Node(40, 50), Node(0, 50)]


@pytest.fixture
def rect_document(half_nodes: list[Node]) -> PatternDocument:
    """Symmetric rectangle with one full-length edge stitch line."""
    return PatternDocument(
        nodes=half_nodes,
        edge_ranges=[EdgeRange(0.0, 1.0)],
        edge_stitches=[EdgeStitch(range_idx=0)],
        name="rectangle",
    )


@pytest.fixture
def tab_extension() -> Extension:
    """20 x 20 tab overlapping the rectangle's right edge by 5mm."""
    return Extension(
        nodes=[Node(35, -10), Node(60, -10), Node(60, 10), Node(35, 10)],
    )
