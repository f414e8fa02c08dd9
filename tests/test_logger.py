"""
Logger Tests
============

- get_logger() hands every caller, on any thread, the same instance.
- Component prefixes reach the handlers.
"""
import logging
import os
import sys
import threading
import time
import unittest
from unittest.mock import patch

os.environ.setdefault('ENABLE_FILE_LOGGING', 'false')
SRC_DIR = os.path.join(os.path.dirname(__file__), '..', 'src')
sys.path.insert(0, os.path.abspath(SRC_DIR))

import utils.logger as logger_module
from utils.logger import OrderLogger, get_logger


class TestGetLogger(unittest.TestCase):
    def setUp(self):
        self._saved = logger_module._global_logger
        logger_module._global_logger = None

    def tearDown(self):
        logger_module._global_logger = self._saved

    def test_same_instance(self):
        self.assertIs(get_logger(), get_logger())

    def test_concurrent_first_calls_build_one_logger(self):
        created = []

        def slow_logger(*args, **kwargs):
            time.sleep(0.05)
            instance = OrderLogger(name="Order-Consolidator-Test", file_logging=False)
            created.append(instance)
            return instance

        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(get_logger())

        with patch.object(logger_module, 'OrderLogger', side_effect=slow_logger):
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        self.assertEqual(len(created), 1)
        self.assertEqual(len(results), 8)
        self.assertTrue(all(r is created[0] for r in results))


class TestOrderLogger(unittest.TestCase):
    def test_component_prefix(self):
        order_logger = OrderLogger(name="Order-Consolidator-Prefix", file_logging=False)
        with self.assertLogs("Order-Consolidator-Prefix", level=logging.INFO) as captured:
            order_logger.info("3 order(s)", component="Export")
        self.assertIn("[Export] 3 order(s)", captured.output[0])

    def test_no_file_handlers_when_disabled(self):
        order_logger = OrderLogger(name="Order-Consolidator-Console", file_logging=False)
        self.assertEqual(len(order_logger.logger.handlers), 1)
        self.assertIsInstance(order_logger.logger.handlers[0], logging.StreamHandler)


if __name__ == "__main__":
    unittest.main()
