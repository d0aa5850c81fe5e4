import contextlib
import io
import unittest
from unittest import mock

from pyoath import cli
from pyoath.cli import main


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        status = main(list(argv))
    return status, out.getvalue(), err.getvalue()


class CLITests(unittest.TestCase):
    def test_hotp(self):
        status, out, _ = run("hotp", "12345678901234567890", "0")
        self.assertEqual(status, 0)
        self.assertEqual(out.strip(), "755224")

    def test_totp(self):
        status, out, _ = run("--digits", "8", "totp", "12345678901234567890", "--time", "59")
        self.assertEqual(status, 0)
        self.assertEqual(out.strip(), "94287082")

    def test_totp_sha256(self):
        secret = "3132333435363738393031323334353637383930313233343536373839303132"
        status, out, _ = run("--digits", "8", "--digest", "SHA256", "totp", secret, "--time", "59")
        self.assertEqual(status, 0)
        self.assertEqual(out.strip(), "46119246")

    def test_totp_reads_clock_once(self):
        with mock.patch.object(cli, "time") as clock:
            clock.time.side_effect = [59, 90, 120]
            status, out, _ = run("--digits", "8", "-v", "totp", "12345678901234567890")
        self.assertEqual(status, 0)
        self.assertEqual(out.strip(), "94287082  (valid ~1s)")
        self.assertEqual(clock.time.call_count, 1)

    def test_config_error(self):
        status, out, err = run("--digits", "5", "hotp", "12345678901234567890", "0")
        self.assertEqual(status, 2)
        self.assertEqual(out, "")
        self.assertIn("at least 6 digits", err)

    def test_unsupported_digest(self):
        status, _, err = run("--digest", "MD5", "hotp", "12345678901234567890", "0")
        self.assertEqual(status, 2)
        self.assertIn("MD5", err)

    def test_negative_counter(self):
        status, _, err = run("hotp", "12345678901234567890", "-1")
        self.assertEqual(status, 2)
        self.assertIn("non-negative", err)


if __name__ == "__main__":
    unittest.main()
