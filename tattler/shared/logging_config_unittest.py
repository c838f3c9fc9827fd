#!/usr/bin/python

import io
import logging
import unittest

from tattler.shared import logging_config


class logging_config_test(unittest.TestCase):

    def setUp(self):
        self.config = logging_config.LoggingConfig()
        # keep the root logger of the test runner untouched
        self.logger = logging.getLogger("tattler.logging_config_test")
        self.logger.propagate = False
        self.config.logger = self.logger

    def tearDown(self):
        self.config._clear_all_handlers()

    def test_allow_below_severity(self):
        log_filter = logging_config.AllowBelowSeverity(logging.ERROR)
        info = logging.LogRecord('x', logging.INFO, __file__, 1, 'm', (), None)
        err = logging.LogRecord('x', logging.ERROR, __file__, 1, 'm', (), None)
        self.assertTrue(log_filter.filter(info))
        self.assertFalse(log_filter.filter(err))

    def test_stream_handler(self):
        stream = io.StringIO()
        self.config._clear_all_handlers()
        self.logger.setLevel(logging.DEBUG)
        self.config.add_stream_handler(stream, level=logging.INFO)
        self.logger.debug("hidden")
        self.logger.info(' * Mock call: obj.greeting()')
        self.assertTrue(' * Mock call: obj.greeting()' in stream.getvalue())
        self.assertFalse('hidden' in stream.getvalue())

    def test_configure_logging(self):
        self.config.configure_logging(use_console=True, verbose=True)
        self.assertEqual(len(self.logger.handlers), 2)
        self.assertEqual(self.logger.level, logging.DEBUG)
        self.assertEqual(self.config.stdout_level, logging.DEBUG)

    def test_console_split(self):
        self.config.configure_logging(use_console=True)
        stdout_handler, stderr_handler = self.logger.handlers
        self.assertEqual(stdout_handler.level, logging.INFO)
        self.assertEqual(stderr_handler.level, logging.ERROR)
        err = logging.LogRecord('x', logging.ERROR, __file__, 1, 'm', (), None)
        self.assertFalse(stdout_handler.filter(err))
        self.assertTrue(stderr_handler.filter(err))


if __name__ == '__main__':
    unittest.main()
