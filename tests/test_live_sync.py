"""
Tests for the live collection mirror.

Run: python3 -m pytest tests/test_live_sync.py -v
"""

import asyncio

from src.services.live_sync import LiveCollectionSync
from tests.fakes import COURSE_DOCS, FakeFirestoreClient


class TestSnapshots:
    """Tests for apply_snapshot and the read side."""

    def test_snapshot_replaces_list(self, sync):
        """Test each snapshot replaces the whole list."""
        sync.apply_snapshot("courses", [("c9", {"title": "Only"})])

        assert [c.id for c in sync.courses] == ["c9"]
        assert sync.find_course("c1") is None

    def test_null_lists_become_empty(self, sync):
        """Test documents with null sections read as empty lists."""
        assert sync.find_course("c2").sections == []

    def test_malformed_document_skipped(self):
        """Test a document that does not validate is left out."""
        live = LiveCollectionSync()
        live.apply_snapshot("courses", [("bad", {"sections": "nope"}), COURSE_DOCS[0]])

        assert [c.id for c in live.courses] == ["c1"]

    def test_reads_return_copies_of_list(self, sync):
        """Test callers cannot change the mirror by mutating the returned list."""
        sync.courses.clear()

        assert len(sync.courses) == 2


class TestErrors:
    """Tests for subscription error reporting."""

    def test_error_becomes_alert(self, sync):
        """Test a listener error is shown as a Data Error alert."""
        sync.report_error("blogs", "permission denied")

        alerts = sync.alerts()
        assert len(alerts) == 1
        assert alerts[0].title == "Data Error"
        assert alerts[0].message == "Failed to load blogs. permission denied"

    def test_list_stays_stale_after_error(self, sync):
        """Test the last snapshot is kept when the listener fails."""
        sync.report_error("blogs", "permission denied")

        assert [b.id for b in sync.blogs] == ["b1"]

    def test_new_snapshot_clears_error(self, sync):
        """Test a fresh snapshot clears the collection's alert."""
        sync.report_error("blogs", "permission denied")
        sync.apply_snapshot("blogs", [])

        assert sync.alerts() == []


class TestListeners:
    """Tests for attach, detach and listener health."""

    def test_attach_and_detach(self, fake_client):
        """Test one listener per collection, all removed on detach."""
        live = LiveCollectionSync(health_interval=60)

        async def scenario():
            live.attach(fake_client)
            assert set(fake_client.watches) == {"courses", "assessments", "blogs"}
            live.detach()

        asyncio.run(scenario())

        assert all(w.unsubscribed for w in fake_client.watches.values())

    def test_close_waits_for_monitor(self, fake_client):
        """Test close leaves the health monitor finished instead of pending."""
        live = LiveCollectionSync(health_interval=60)

        async def scenario():
            live.attach(fake_client)
            await asyncio.sleep(0)
            task = live._monitor_task
            await live.close()
            return task

        task = asyncio.run(scenario())

        assert task.done()
        assert task.cancelled()
        assert all(w.unsubscribed for w in fake_client.watches.values())

    def test_snapshot_from_library_thread(self, fake_client):
        """Test callbacks from another thread land on the event loop."""
        live = LiveCollectionSync(health_interval=60)

        async def scenario():
            live.attach(fake_client)
            await asyncio.to_thread(fake_client.emit, "courses", COURSE_DOCS)
            await asyncio.sleep(0)
            live.detach()

        asyncio.run(scenario())

        assert [c.id for c in live.courses] == ["c1", "c2"]

    def test_stopped_listener_reported(self, fake_client):
        """Test a listener that stopped on its own raises a subscription alert."""
        live = LiveCollectionSync(health_interval=60)

        async def scenario():
            live.attach(fake_client)
            fake_client.watches["assessments"].is_active = False
            live.check_listeners()
            live.detach()

        asyncio.run(scenario())

        assert [a.message for a in live.alerts()] == [
            "Failed to load assessments. The live listener stopped unexpectedly."
        ]

    def test_rebind_moves_listeners(self, fake_client):
        """Test rebind detaches from the old client and attaches to the new one."""
        replacement = FakeFirestoreClient()
        live = LiveCollectionSync(health_interval=60)

        async def scenario():
            live.attach(fake_client)
            live.rebind(replacement)
            live.detach()

        asyncio.run(scenario())

        assert all(w.unsubscribed for w in fake_client.watches.values())
        assert set(replacement.watches) == {"courses", "assessments", "blogs"}
