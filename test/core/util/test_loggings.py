import logging
import unittest

from cyclecursor import CycleCursor
from cyclecursor.core.util.defs import PACKAGE_NAME, STALE_POSITION_HINT
from cyclecursor.core.util.errors import StalePositionError
from cyclecursor.core.util.loggings import DEFAULT_LOGGING_CONFIG, apply_default_config


class TestLoggings(unittest.TestCase):

    def tearDown(self) -> None:
        package_logger = logging.getLogger(PACKAGE_NAME)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True

    def test_apply_default_config(self) -> None:
        apply_default_config()
        package_logger = logging.getLogger(PACKAGE_NAME)
        self.assertEqual(package_logger.level, logging.DEBUG)
        self.assertEqual(len(package_logger.handlers), 1)
        self.assertFalse(package_logger.propagate)

    def test_apply_default_config_level(self) -> None:
        apply_default_config('WARNING')
        self.assertEqual(logging.getLogger(PACKAGE_NAME).level, logging.WARNING)
        self.assertEqual(DEFAULT_LOGGING_CONFIG['loggers'][PACKAGE_NAME]['level'], 'DEBUG')

    def test_apply_default_config_keeps_other_loggers(self) -> None:
        other = logging.getLogger('unrelated.logger')
        apply_default_config()
        self.assertFalse(other.disabled)
        self.assertFalse(other.handlers)

    def test_cursor_logs_reach_package_logger(self) -> None:
        apply_default_config('ERROR')
        cursor = CycleCursor([1, 2, 3])
        cursor.cycle_prev()
        cursor.inner.clear()
        with self.assertLogs(PACKAGE_NAME, level='ERROR') as logs:
            with self.assertRaises(StalePositionError):
                cursor.get()
        self.assertEqual(logs.records[0].name, f'{PACKAGE_NAME}.core.cursor')


class TestErrors(unittest.TestCase):

    def test_stale_position_error(self) -> None:
        error = StalePositionError(5, 3)
        self.assertIsInstance(error, IndexError)
        self.assertEqual(error.position, 5)
        self.assertEqual(error.length, 3)
        self.assertIn(STALE_POSITION_HINT, str(error))
        self.assertEqual(str(StalePositionError(5, 3, 'custom')), 'custom')
