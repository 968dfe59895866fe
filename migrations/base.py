"""Base class for ad format migrations.

A migration knows which publications to read, which array inside each
publication holds the advertising opportunities, and how to resolve one
opportunity's legacy dimensions. Planning is pure: it never touches the
database and never mutates the publication it is given.
"""

from typing import Any, Dict, Mapping

from migrations.models import PublicationPlan


def publication_name(publication: Mapping[str, Any]) -> str:
    """``basicInfo.publicationName`` with a fallback for incomplete records."""
    basic_info = publication.get("basicInfo") or {}
    return basic_info.get("publicationName") or "Unknown"


def publication_id(publication: Mapping[str, Any]) -> Any:
    """The business ``publicationId``, falling back to the document ``_id``."""
    return publication.get("publicationId") or publication.get("_id")


class FormatMigration:
    """Base class for migrations that populate ``format.dimensions``.

    Subclasses set ``name`` and ``field_path`` and implement ``plan``.

    Example:
        >>> class PrintMigration(FormatMigration):
        ...     name = "print-formats"
        ...     field_path = "distributionChannels.print"
        ...     def plan(self, publication):
        ...         return PublicationPlan(field_path=self.field_path)
    """

    name = ""
    field_path = ""
    script = ""
    container_label = "Newsletter"

    @property
    def query(self) -> Dict[str, Any]:
        """Mongo filter selecting the publications to scan."""
        return {}

    def plan(self, publication: Mapping[str, Any]) -> PublicationPlan:
        """Resolve every opportunity in a publication.

        Args:
            publication: Publication document as read from the store.

        Returns:
            The PublicationPlan with results and the rewritten array.
        """
        raise NotImplementedError
