"""Shared fixtures: an in-memory stand-in for a pymongo collection."""

import copy
from dataclasses import dataclass
from typing import Any

import pytest
from pymongo.errors import OperationFailure


@dataclass
class FakeUpdateResult:
    matched_count: int
    modified_count: int


def _get_path(document: dict, path: str) -> Any:
    value: Any = document
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value


def _set_path(document: dict, path: str, value: Any) -> None:
    parts = path.split(".")
    target = document
    for part in parts[:-1]:
        target = target.setdefault(part, {})
    target[parts[-1]] = value


def _matches(document: dict, query: dict) -> bool:
    for path, condition in query.items():
        value = _get_path(document, path)
        if isinstance(condition, dict):
            if condition.get("$exists") and value is None:
                return False
            if "$ne" in condition and value == condition["$ne"]:
                return False
        elif value != condition:
            return False
    return True


class FakeCollection:
    """Supports the find/update_one subset used by PublicationRepository.

    Every update_one call is recorded in ``updates``. Ids listed in
    ``fail_on`` raise OperationFailure instead of being written.
    """

    def __init__(self, documents=None, fail_on=()):
        self.documents = [copy.deepcopy(doc) for doc in documents or []]
        self.updates = []
        self.fail_on = set(fail_on)
        self.fail_reads = False

    def find(self, query=None):
        if self.fail_reads:
            raise OperationFailure("read failed")
        return [copy.deepcopy(doc) for doc in self.documents if _matches(doc, query or {})]

    def update_one(self, filter_doc, update):
        self.updates.append((filter_doc, update))
        if filter_doc.get("_id") in self.fail_on:
            raise OperationFailure("write failed")
        for doc in self.documents:
            if _matches(doc, filter_doc):
                for path, value in update.get("$set", {}).items():
                    _set_path(doc, path, copy.deepcopy(value))
                return FakeUpdateResult(matched_count=1, modified_count=1)
        return FakeUpdateResult(matched_count=0, modified_count=0)

    def get(self, doc_id):
        return next(doc for doc in self.documents if doc["_id"] == doc_id)


def newsletter_publication(doc_id, name, ads, newsletter_name="Daily Brief", publication_id=None):
    """Publication document with one newsletter holding the given ads."""
    doc = {
        "_id": doc_id,
        "basicInfo": {"publicationName": name},
        "distributionChannels": {
            "newsletters": [
                {"name": newsletter_name, "advertisingOpportunities": ads},
            ],
        },
    }
    if publication_id is not None:
        doc["publicationId"] = publication_id
    return doc


@pytest.fixture
def make_publication():
    return newsletter_publication


@pytest.fixture
def legacy_publications():
    """Publications with a mix of legacy newsletter dimension values."""
    return [
        newsletter_publication("pub-1", "Chicago Reader", [
            {"name": "Dedicated Send", "position": "dedicated", "dimensions": "Full email"},
            {"name": "Header Banner", "position": "header", "dimensions": "300x250, 600x150"},
        ], publication_id=1001),
        newsletter_publication("pub-2", "Southside Weekly", [
            {"name": "Inline Spot", "position": "inline"},
            {"name": "Mystery Ad", "position": "footer", "dimensions": "multiple"},
        ]),
        newsletter_publication("pub-3", "Already Done", [
            {
                "name": "Leaderboard",
                "position": "header",
                "dimensions": "728x90",
                "format": {"dimensions": "728x90"},
            },
        ]),
    ]


@pytest.fixture
def fake_collection(legacy_publications):
    return FakeCollection(legacy_publications)


@pytest.fixture
def collection_factory():
    return FakeCollection
