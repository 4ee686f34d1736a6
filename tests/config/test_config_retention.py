import unittest
from datetime import datetime, timedelta

from dropboxgc.config import RECENT_WINDOW, RetentionPolicy, is_recent
from dropboxgc.models import DropboxEntry
from dropboxgc.util.time import local_datetime

NOW = local_datetime(2023, 10, 8, 12, 0)


def _entry(created_at: datetime) -> DropboxEntry:
    return DropboxEntry(name="/path/to/file.txt", created_at=created_at, is_container=False)


class TestIsRecent(unittest.TestCase):
    def test_default_window_is_thirty_days(self) -> None:
        self.assertEqual(RECENT_WINDOW, timedelta(days=30))

    def test_recent_file(self) -> None:
        self.assertTrue(is_recent(_entry(NOW - timedelta(days=7)), now=NOW))

    def test_old_file(self) -> None:
        self.assertFalse(is_recent(_entry(local_datetime(2023, 8, 8, 12, 0)), now=NOW))

    def test_really_old_file(self) -> None:
        self.assertFalse(is_recent(_entry(local_datetime(2021, 10, 8, 12, 0)), now=NOW))

    def test_window_boundary_is_exclusive(self) -> None:
        self.assertFalse(is_recent(_entry(NOW - RECENT_WINDOW), now=NOW))
        self.assertTrue(
            is_recent(_entry(NOW - RECENT_WINDOW + timedelta(seconds=1)), now=NOW)
        )

    def test_custom_window(self) -> None:
        entry = _entry(NOW - timedelta(days=7))
        self.assertFalse(is_recent(entry, now=NOW, window=timedelta(days=3)))


class TestRetentionPolicy(unittest.TestCase):
    def test_policy_classifies_against_fixed_reference(self) -> None:
        policy = RetentionPolicy(reference_now=NOW)
        self.assertTrue(policy.is_recent(_entry(NOW - timedelta(days=7))))
        self.assertFalse(policy.is_recent(_entry(NOW - timedelta(days=60))))

    def test_capture_reads_clock_once(self) -> None:
        policy = RetentionPolicy.capture(timedelta(days=10))
        self.assertIsNotNone(policy.reference_now.tzinfo)
        self.assertEqual(policy.recent_window, timedelta(days=10))
        self.assertEqual(RetentionPolicy.capture().recent_window, RECENT_WINDOW)

    def test_rejects_naive_reference(self) -> None:
        with self.assertRaises(ValueError):
            RetentionPolicy(reference_now=datetime(2023, 10, 8))

    def test_rejects_non_positive_window(self) -> None:
        with self.assertRaises(ValueError):
            RetentionPolicy(reference_now=NOW, recent_window=timedelta(0))


if __name__ == "__main__":
    unittest.main()
