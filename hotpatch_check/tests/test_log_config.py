import io
import logging
import unittest

from hotpatch_check.lib.log_config import ROOT_LOGGER_NAME, setup_logging


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        setup_logging(verbose=False)

    def test_verbose_emits_debug(self):
        buf = io.StringIO()
        setup_logging(verbose=True, stream=buf)
        logging.getLogger(f"{ROOT_LOGGER_NAME}.validators.log_scanner").debug("scanning %s", "x.log")
        out = buf.getvalue()
        self.assertIn("DEBUG", out)
        self.assertIn("hotpatch_check.validators.log_scanner", out)
        self.assertIn("scanning x.log", out)

    def test_default_level_drops_debug(self):
        buf = io.StringIO()
        setup_logging(stream=buf)
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.debug("hidden")
        logger.warning("shown")
        self.assertNotIn("hidden", buf.getvalue())
        self.assertIn("WARNING", buf.getvalue())

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging(stream=io.StringIO())
        logger = setup_logging(verbose=True, stream=io.StringIO())
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)


if __name__ == "__main__":
    unittest.main()
