"""
Integration tests for logz

Tests end-to-end scenarios combining multiple components:
- Logger + routing + stack dumps
- Logger + MultiWriter outputs
- Logger + File destination
"""

import shutil
import tempfile
import unittest
from pathlib import Path

from logz import LogLevel, Logz, multi_writer
from logz.file_handler import FileDestination
from tests.helpers.destinations import FailingDestination, RecordingDestination


class TestEndToEndLogging(unittest.TestCase):
    """Test complete end-to-end logging scenarios"""

    def setUp(self):
        """Set up test fixtures"""
        self.stdout = RecordingDestination()
        self.buf = RecordingDestination()
        self.logger = Logz(stdout=self.stdout)
        self.logger.init(self.buf, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR, False)

    def tearDown(self):
        if self.logger.initialized:
            self.logger.close()

    def test_trace_writes_nothing(self):
        self.logger.trace("x")

        self.assertEqual(self.buf.text, "")
        self.assertEqual(self.stdout.text, "")

    def test_info_goes_to_stdout_only(self):
        self.logger.info("x")

        self.assertEqual(self.buf.text, "")
        self.assertTrue(self.stdout.text.endswith(" INFO| x\n"))

    def test_warning_goes_to_output(self):
        self.logger.warning("x")

        self.assertEqual(self.buf.lines[0][-8:], " WARN| x")
        self.assertEqual(len(self.buf.chunks), 1)
        self.assertTrue(self.stdout.text.endswith(" WARN| x\n"))

    def test_error_appends_stack(self):
        self.logger.error("x")

        self.assertEqual(len(self.buf.chunks), 2)
        self.assertTrue(self.buf.chunks[0].endswith("ERROR| x\n"))
        self.assertIn("test_error_appends_stack", self.buf.chunks[1])
        self.assertEqual(len(self.stdout.chunks), 1)

    def test_critical_writes_then_exits(self):
        with self.assertRaises(SystemExit) as cm:
            self.logger.critical("x")

        self.assertEqual(cm.exception.code, 1)
        self.assertTrue(self.buf.chunks[0].endswith("FATAL| x\n"))
        self.assertIn("test_critical_writes_then_exits", self.buf.chunks[1])

    def test_failing_sink_does_not_break_logging(self):
        """Test a failing output next to a healthy one"""
        self.logger.close()
        healthy = RecordingDestination()
        failing = FailingDestination()
        logger = Logz(stdout=self.stdout)
        logger.init(multi_writer(failing, healthy), LogLevel.CRITICAL, LogLevel.TRACE, LogLevel.CRITICAL)

        logger.info("still delivered")
        logger.close()

        self.assertEqual(failing.calls, 1)
        self.assertIn(" INFO| still delivered", healthy.text)


class TestOutputIsStdout(unittest.TestCase):
    """Test deduplication when the configured output is stdout"""

    def test_each_line_written_once(self):
        stdout = RecordingDestination()
        logger = Logz(stdout=stdout)
        logger.init(stdout, LogLevel.TRACE, LogLevel.TRACE, LogLevel.CRITICAL)

        logger.info("once")
        logger.error("once more")

        self.assertEqual(len(stdout.chunks), 2)
        logger.close()

    def test_distinct_wrapper_is_not_deduplicated(self):
        """Test that only the same object counts as stdout"""
        stdout = RecordingDestination()
        logger = Logz(stdout=stdout)
        logger.init(multi_writer(stdout), LogLevel.TRACE, LogLevel.TRACE, LogLevel.CRITICAL)

        logger.info("twice")

        self.assertEqual(len(stdout.chunks), 2)
        logger.close()


class TestFileLogging(unittest.TestCase):
    """Test logging to a file next to stdout"""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.log_file = Path(self.temp_dir) / "app.log"

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_file_receives_routed_levels_and_stack(self):
        stdout = RecordingDestination()
        logger = Logz(stdout=stdout)
        logger.init(FileDestination(str(self.log_file)), LogLevel.TRACE, LogLevel.WARNING, LogLevel.ERROR, True)

        logger.trace("trace line")
        logger.warningf("%d retries", 3)
        logger.error("failure")
        logger.close()

        content = self.log_file.read_text(encoding="utf-8")
        self.assertNotIn("trace line", content)
        self.assertIn(" WARN|test_integration.py:", content)
        self.assertIn("3 retries", content)
        self.assertIn("ERROR|test_integration.py:", content)
        self.assertIn("test_file_receives_routed_levels_and_stack", content)
        self.assertEqual(len(stdout.lines), 3)


if __name__ == "__main__":
    unittest.main()
