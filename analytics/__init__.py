"""Ad Format Dimensions - Analytics Module.

This module surveys legacy newsletter dimension values so the legacy
dimension map can be reviewed before a migration runs.

Example:
    >>> from analytics import analyze_newsletter_dimensions, format_analysis
    >>> print(format_analysis(analyze_newsletter_dimensions(publications)))
"""

from analytics.dimension_analyzer import (
    DimensionAnalysis,
    DimensionPlacement,
    DimensionUsage,
    analyze_newsletter_dimensions,
    format_analysis,
)

__all__ = [
    "DimensionAnalysis",
    "DimensionPlacement",
    "DimensionUsage",
    "analyze_newsletter_dimensions",
    "format_analysis",
]
