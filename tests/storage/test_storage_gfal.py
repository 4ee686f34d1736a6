import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock

from dropboxgc.collect import get_dropbox_files
from dropboxgc.config import RetentionPolicy, Settings
from dropboxgc.errors import DropboxGCError, NoEntriesParsedError, NotFoundError, ParseError
from dropboxgc.models import DropboxEntry
from dropboxgc.storage import GfalLister
from dropboxgc.util.time import local_datetime

LOCATION = "https://fndcadoor.example.org:2880/pnfs/resilient/jobsub_stage/5a48ca58/"

LISTING = (
    b"-rwxrwxrwx   0 0     0            50 Sep 26 14:55 bogus_file.out\n"
    b"\n"
    b"drwxrwxrwx   0 0     0             0 Apr  6  2022 bogus_dir\n"
)


def _completed(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> Mock:
    proc = Mock()
    proc.returncode = returncode
    proc.stdout = stdout
    proc.stderr = stderr
    return proc


class TestGfalLister(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = RetentionPolicy(reference_now=local_datetime(2023, 10, 8, 12, 0))

    def test_fetch_raw_entries_runs_gfal_ls(self) -> None:
        runner = Mock(return_value=_completed(stdout=LISTING))
        lister = GfalLister.from_runner(self.policy, runner)

        blobs = lister.fetch_raw_entries(LOCATION)

        self.assertEqual(len(blobs), 2)
        self.assertTrue(blobs[0].endswith(b"bogus_file.out"))
        self.assertEqual(runner.call_args.args[0], ["gfal-ls", "-l", LOCATION])
        self.assertIsNone(runner.call_args.kwargs["env"])

    def test_fetch_raw_entries_passes_bearer_token(self) -> None:
        runner = Mock(return_value=_completed(stdout=b""))
        with tempfile.TemporaryDirectory() as td:
            token_file = Path(td) / "bt_u10610"
            token_file.write_text("secret-token\n", encoding="utf-8")
            lister = GfalLister.from_runner(
                self.policy, runner, bearer_token_file=str(token_file)
            )
            lister.fetch_raw_entries(LOCATION)

        env = runner.call_args.kwargs["env"]
        self.assertEqual(env["BEARER_TOKEN"], "secret-token")

    def test_missing_token_file(self) -> None:
        runner = Mock(return_value=_completed())
        lister = GfalLister.from_runner(
            self.policy, runner, bearer_token_file="/nonexistent/bt_u0"
        )
        with self.assertRaises(DropboxGCError):
            lister.fetch_raw_entries(LOCATION)
        runner.assert_not_called()

    def test_fetch_failure_is_mapped(self) -> None:
        runner = Mock(return_value=_completed(returncode=2, stderr=b"No such file"))
        lister = GfalLister.from_runner(self.policy, runner)
        with self.assertRaises(NotFoundError):
            lister.fetch_raw_entries(LOCATION)

    def test_parse_one_blob_uses_reference_now(self) -> None:
        lister = GfalLister.from_runner(self.policy, Mock())
        entry = lister.parse_one_blob(
            b"-rwxrwxrwx   0 0     0            50 Sep 26 14:55 bogus_file.out"
        )
        self.assertEqual(
            entry,
            DropboxEntry("bogus_file.out", local_datetime(2023, 9, 26, 14, 55), False),
        )

    def test_parse_one_blob_keeps_non_utf8_name_bytes(self) -> None:
        lister = GfalLister.from_runner(self.policy, Mock())
        entry = lister.parse_one_blob(b"-rwxrwxrwx   0 0 0 50 Sep 26 14:55 caf\xe9")
        self.assertEqual(entry.created_at, local_datetime(2023, 9, 26, 14, 55))
        self.assertEqual(
            entry.name.encode("utf-8", errors="surrogateescape"), b"caf\xe9"
        )

    def test_parse_one_blob_non_utf8_junk_is_parse_error(self) -> None:
        lister = GfalLister.from_runner(self.policy, Mock())
        with self.assertRaises(ParseError):
            lister.parse_one_blob(b"\xff\xfe not a listing line")

    def test_parse_one_blob_rejects_junk(self) -> None:
        lister = GfalLister.from_runner(self.policy, Mock())
        with self.assertRaises(ParseError):
            lister.parse_one_blob(b"gfal-ls: warning, something odd")

    def test_from_settings(self) -> None:
        settings = Settings(gfal_ls="/usr/bin/gfal-ls", command_timeout_sec=30)
        lister = GfalLister.from_settings(settings, self.policy)
        self.assertIsInstance(lister, GfalLister)


class TestGfalListerWithGetDropboxFiles(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = RetentionPolicy(reference_now=local_datetime(2023, 10, 8, 12, 0))

    def test_partial_listing(self) -> None:
        stdout = (
            b"-rwxrwxrwx   0 0     0            50 Sep 26 14:55 bogus_file.out\n"
            b"lrwxrwxrwx   0 0     0            50 Sep 26 14:55 a_link\n"
            b"drwxrwxrwx   0 0     0             0 Apr  6  2022 bogus_dir\n"
        )
        lister = GfalLister.from_runner(self.policy, Mock(return_value=_completed(stdout=stdout)))

        listing = get_dropbox_files(lister, LOCATION)

        self.assertEqual(
            [e.name for e in listing.entries], ["bogus_file.out", "bogus_dir"]
        )
        self.assertEqual(listing.total, 3)
        self.assertEqual(len(listing.skipped), 1)
        self.assertEqual(listing.skipped[0].index, 1)
        self.assertEqual(listing.skipped[0].error_type, "ParseError")

    def test_format_drift_is_fatal(self) -> None:
        stdout = b"bogus_file.out\nbogus_dir\n"
        lister = GfalLister.from_runner(self.policy, Mock(return_value=_completed(stdout=stdout)))

        with self.assertRaises(NoEntriesParsedError):
            get_dropbox_files(lister, LOCATION)


if __name__ == "__main__":
    unittest.main()
