"""Plain-text report for migration runs."""

from typing import List, Union

from migrations.models import MigrationSummary

WIDTH = 100


def _format_value(value: Union[str, List[str], None]) -> str:
    if value is None:
        return "MISSING"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def format_report(summary: MigrationSummary, script: str = "") -> str:
    """Render the categorized migration report.

    Args:
        summary: Result of run_migration().
        script: Script path shown in the "to apply" hint.

    Returns:
        Multi-line report text.
    """
    lines = ["", "📋 MIGRATION RESULTS:", "─" * WIDTH]

    successful = summary.successful
    lines.append(f"\n✅ Successfully mapped: {len(successful)}")
    if successful:
        lines.append("\n   By category:")
        for category, count in summary.by_category().items():
            lines.append(f"   • {category}: {count}")

    review = summary.review
    if review:
        lines.append(f"\n⚠️  Needs Manual Review: {len(review)}")
        lines.append("   These ads require manual inspection and update:")
        for idx, result in enumerate(review, 1):
            lines.append(f"\n   {idx}. {result.publication_name}")
            lines.append(f'      {summary.container_label}: "{result.container_name}"')
            lines.append(f'      Ad: "{result.ad_name}"')
            lines.append(f'      Current: "{_format_value(result.old_dimensions)}"')
            lines.append("      Suggested: Review and set appropriate dimensions")

    lines.extend(["", "", "📊 SUMMARY:", "─" * WIDTH])
    lines.append(f"  Total Ads Processed: {len(summary.processed)}")
    lines.append(f"  Successfully Mapped: {len(successful)}")
    lines.append(f"  Needs Manual Review: {len(review)}")
    lines.append(f"  Already Migrated: {summary.already_migrated}")

    if not summary.dry_run:
        lines.append(f"  Publications Updated: {summary.publications_updated}")
        lines.append(f"  Ads Updated: {summary.ads_updated}")
        if summary.errors:
            lines.append(f"\n❌ Write Errors: {len(summary.errors)}")
            for error in summary.errors:
                lines.append(f"   • {error.publication_name} ({error.publication_id}): {error.error}")

    if summary.dry_run and summary.processed:
        lines.append("\n💡 To apply these changes, run:")
        lines.append(f"   python {script or 'scripts/migrate_newsletter_formats.py'} --apply")

    lines.append("\n" + "=" * WIDTH)
    return "\n".join(lines)
