"""Data models for ad format migrations.

A migration walks every advertising opportunity in a publication and
records one MigrationResult per opportunity. Results are never persisted;
they feed the printed report.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from formats.models import DimensionValue


class MigrationOutcome(str, Enum):
    """Per-record processing outcome."""

    ALREADY_MIGRATED = "already-migrated"  # format.dimensions present, skipped
    MISSING = "missing"  # no legacy value, resolved from position
    MAPPED = "mapped"  # verbatim hit in the legacy dimension map
    INFERRED = "inferred"  # resolved by heuristics
    NEEDS_REVIEW = "needs-review"  # a human must set the dimensions


SUCCESS_OUTCOMES = frozenset([
    MigrationOutcome.MISSING,
    MigrationOutcome.MAPPED,
    MigrationOutcome.INFERRED,
])


@dataclass
class MigrationResult:
    """Outcome for one advertising opportunity.

    Attributes:
        publication_id: ``publicationId`` or the document ``_id``.
        publication_name: ``basicInfo.publicationName``.
        container_name: Newsletter name, or the channel for website ads.
        ad_name: Advertising opportunity name.
        old_dimensions: Legacy value(s) found on the record.
        new_dimensions: Resolved value, or NEEDS_REVIEW.
        outcome: Processing outcome.
        category: Derived category of new_dimensions (None when unresolved).
    """

    publication_id: Any
    publication_name: str
    container_name: str
    ad_name: str
    old_dimensions: Optional[Union[str, List[str]]]
    new_dimensions: Optional[DimensionValue]
    outcome: MigrationOutcome
    category: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.outcome in SUCCESS_OUTCOMES

    @property
    def needs_review(self) -> bool:
        return self.outcome == MigrationOutcome.NEEDS_REVIEW


@dataclass
class PublicationPlan:
    """Planned changes for one publication document.

    Attributes:
        results: One result per advertising opportunity visited.
        field_path: Dotted path of the array to ``$set``.
        value: Rewritten array (a deep copy of the original).
        ads_changed: Opportunities that gained ``format.dimensions``.
    """

    results: List[MigrationResult] = field(default_factory=list)
    field_path: str = ""
    value: Any = None
    ads_changed: int = 0

    @property
    def changed(self) -> bool:
        return self.ads_changed > 0


@dataclass
class WriteError:
    """A failed publication update."""

    publication_id: Any
    publication_name: str
    error: str


@dataclass
class MigrationSummary:
    """Everything a migration run produced."""

    migration: str
    container_label: str = "Newsletter"
    dry_run: bool = True
    publications_scanned: int = 0
    publications_updated: int = 0
    ads_updated: int = 0
    results: List[MigrationResult] = field(default_factory=list)
    errors: List[WriteError] = field(default_factory=list)

    @property
    def processed(self) -> List[MigrationResult]:
        """Results excluding already-migrated records."""
        return [r for r in self.results if r.outcome != MigrationOutcome.ALREADY_MIGRATED]

    @property
    def successful(self) -> List[MigrationResult]:
        return [r for r in self.results if r.is_success]

    @property
    def review(self) -> List[MigrationResult]:
        return [r for r in self.results if r.needs_review]

    @property
    def already_migrated(self) -> int:
        return sum(1 for r in self.results if r.outcome == MigrationOutcome.ALREADY_MIGRATED)

    def by_category(self) -> Dict[str, int]:
        """Successful results counted per category, in first-seen order."""
        return dict(Counter(r.category or "unknown" for r in self.successful))

    def by_outcome(self) -> Dict[str, int]:
        return dict(Counter(r.outcome.value for r in self.results))
