"""Tests for the migration runner and report.

This module tests:
- Dry-run safety (no writes)
- Apply mode (one update per changed publication)
- Idempotence (a second apply writes nothing)
- Per-publication write failures
- Report rendering and the script entry point

Run with: pytest tests/test_migration_runner.py -v
"""

import pytest

from migrations import runner
from migrations.newsletter_formats import NewsletterFormatMigration
from migrations.report import format_report
from migrations.runner import main, run_migration
from migrations.website_formats import WebsiteFormatMigration
from storage.database import StorageError
from storage.publication_repository import PublicationRepository


class TestDryRun:
    """Dry-run never writes."""

    @pytest.mark.asyncio
    async def test_dry_run_issues_no_updates(self, fake_collection):
        summary = await run_migration(
            NewsletterFormatMigration(), PublicationRepository(fake_collection)
        )

        assert fake_collection.updates == []
        assert summary.dry_run is True
        assert summary.publications_scanned == 3
        assert summary.publications_updated == 0
        assert summary.ads_updated == 0

    @pytest.mark.asyncio
    async def test_dry_run_reports_outcomes(self, fake_collection):
        summary = await run_migration(
            NewsletterFormatMigration(), PublicationRepository(fake_collection)
        )

        assert summary.by_outcome() == {
            "mapped": 1,
            "inferred": 1,
            "needs-review": 2,
            "already-migrated": 1,
        }
        assert len(summary.processed) == 4
        assert len(summary.successful) == 2
        assert len(summary.review) == 2
        assert summary.already_migrated == 1
        assert summary.by_category() == {"takeover": 1, "iab-standard": 1}


class TestApply:
    """Apply mode writes one update per changed publication."""

    @pytest.mark.asyncio
    async def test_apply_updates_changed_publications_only(self, fake_collection):
        summary = await run_migration(
            NewsletterFormatMigration(), PublicationRepository(fake_collection), apply=True
        )

        assert summary.publications_updated == 1
        assert summary.ads_updated == 2
        assert summary.errors == []
        assert len(fake_collection.updates) == 1

        filter_doc, update = fake_collection.updates[0]
        assert filter_doc == {"_id": "pub-1"}
        assert list(update["$set"]) == ["distributionChannels.newsletters"]

        ads = fake_collection.get("pub-1")["distributionChannels"]["newsletters"][0]["advertisingOpportunities"]
        assert ads[0]["format"] == {"dimensions": "full-newsletter"}
        assert ads[1]["format"] == {"dimensions": ["300x250", "600x150"]}

    @pytest.mark.asyncio
    async def test_second_apply_is_a_no_op(self, fake_collection):
        repository = PublicationRepository(fake_collection)
        await run_migration(NewsletterFormatMigration(), repository, apply=True)
        writes_after_first_run = len(fake_collection.updates)

        summary = await run_migration(NewsletterFormatMigration(), repository, apply=True)

        assert len(fake_collection.updates) == writes_after_first_run
        assert summary.publications_updated == 0
        assert summary.already_migrated == 3
        # Review items stay pending until a human fixes them
        assert len(summary.review) == 2

    @pytest.mark.asyncio
    async def test_write_failure_is_recorded_and_batch_continues(self, make_publication, collection_factory):
        collection = collection_factory(
            [
                make_publication("bad", "Broken Pub", [{"name": "A", "dimensions": "600x150"}]),
                make_publication("good", "Working Pub", [{"name": "B", "dimensions": "Text only"}]),
            ],
            fail_on={"bad"},
        )

        summary = await run_migration(
            NewsletterFormatMigration(), PublicationRepository(collection), apply=True
        )

        assert len(collection.updates) == 2
        assert summary.publications_updated == 1
        assert summary.ads_updated == 1
        assert len(summary.errors) == 1
        assert summary.errors[0].publication_id == "bad"
        assert summary.errors[0].publication_name == "Broken Pub"
        assert "format" not in collection.get("bad")["distributionChannels"]["newsletters"][0]["advertisingOpportunities"][0]

    @pytest.mark.asyncio
    async def test_malformed_record_does_not_abort_batch(self, make_publication, collection_factory):
        collection = collection_factory([
            make_publication("odd", "Odd Pub", [{"name": "A", "dimensions": ["300x250", 728]}]),
            make_publication("ok", "Fine Pub", [{"name": "B", "dimensions": "Text only"}]),
        ])

        summary = await run_migration(
            NewsletterFormatMigration(), PublicationRepository(collection), apply=True
        )

        assert summary.publications_scanned == 2
        assert summary.publications_updated == 1
        assert len(summary.review) == 1
        assert [update[0] for update in collection.updates] == [{"_id": "ok"}]
        assert 'Current: "300x250, 728"' in format_report(summary)

    @pytest.mark.asyncio
    async def test_read_failure_propagates(self, fake_collection):
        fake_collection.fail_reads = True
        with pytest.raises(StorageError):
            await run_migration(NewsletterFormatMigration(), PublicationRepository(fake_collection))

    @pytest.mark.asyncio
    async def test_website_migration_uses_its_query(self, collection_factory):
        collection = collection_factory([
            {"_id": "w1", "distributionChannels": {"website": {"advertisingOpportunities": [
                {"name": "Box", "sizes": ["300x250"]},
            ]}}},
            {"_id": "w2", "distributionChannels": {"website": {"advertisingOpportunities": []}}},
            {"_id": "w3", "distributionChannels": {}},
        ])

        summary = await run_migration(
            WebsiteFormatMigration(), PublicationRepository(collection), apply=True
        )

        assert summary.publications_scanned == 1
        assert summary.publications_updated == 1
        assert collection.updates[0][0] == {"_id": "w1"}


class TestReport:
    """Tests for format_report."""

    @pytest.mark.asyncio
    async def test_dry_run_report(self, fake_collection):
        summary = await run_migration(
            NewsletterFormatMigration(), PublicationRepository(fake_collection)
        )
        report = format_report(summary, "scripts/migrate_newsletter_formats.py")

        assert "✅ Successfully mapped: 2" in report
        assert "• takeover: 1" in report
        assert "⚠️  Needs Manual Review: 2" in report
        assert 'Newsletter: "Daily Brief"' in report
        assert 'Current: "MISSING"' in report
        assert 'Current: "multiple"' in report
        assert "Total Ads Processed: 4" in report
        assert "Already Migrated: 1" in report
        assert "python scripts/migrate_newsletter_formats.py --apply" in report
        assert "Publications Updated" not in report

    @pytest.mark.asyncio
    async def test_apply_report(self, fake_collection):
        summary = await run_migration(
            NewsletterFormatMigration(), PublicationRepository(fake_collection), apply=True
        )
        report = format_report(summary)

        assert "Publications Updated: 1" in report
        assert "Ads Updated: 2" in report
        assert "--apply" not in report


class TestMain:
    """Tests for the script entry point."""

    def test_dry_run_exit_code_and_no_writes(self, monkeypatch, tmp_path, fake_collection, capsys):
        monkeypatch.setattr(
            runner, "connect_to_database", lambda uri, name: {"publications": fake_collection}
        )

        code = main(
            NewsletterFormatMigration(),
            ["--uri", "mongodb://localhost:27017", "--config-dir", str(tmp_path)],
        )

        assert code == 0
        assert fake_collection.updates == []
        output = capsys.readouterr().out
        assert "DRY RUN MODE" in output
        assert "Needs Manual Review: 2" in output

    def test_apply_flag_writes(self, monkeypatch, tmp_path, fake_collection):
        monkeypatch.setattr(
            runner, "connect_to_database", lambda uri, name: {"publications": fake_collection}
        )

        code = main(
            NewsletterFormatMigration(),
            ["--apply", "--uri", "mongodb://localhost:27017", "--config-dir", str(tmp_path)],
        )

        assert code == 0
        assert len(fake_collection.updates) == 1

    def test_connection_failure_exits_nonzero(self, monkeypatch, tmp_path):
        def fail(uri, name):
            raise StorageError("unreachable")

        monkeypatch.setattr(runner, "connect_to_database", fail)

        code = main(
            NewsletterFormatMigration(),
            ["--uri", "mongodb://localhost:27017", "--config-dir", str(tmp_path)],
        )
        assert code == 1

    def test_missing_uri_exits_nonzero(self, monkeypatch, tmp_path):
        monkeypatch.delenv("MONGODB_URI", raising=False)
        code = main(NewsletterFormatMigration(), ["--config-dir", str(tmp_path)])
        assert code == 1
