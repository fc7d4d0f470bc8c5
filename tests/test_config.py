"""
Tests for configuration loading.
"""
import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from analytics_reporting.config import (
    load_config,
    DEFAULT_APPLICATION_NAME,
    DEFAULT_KEY_FILE_LOCATION,
    DEFAULT_VIEW_ID
)


class TestLoadConfig(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = load_config()

        self.assertEqual(config.key_file_path, DEFAULT_KEY_FILE_LOCATION)
        self.assertEqual(config.view_id, DEFAULT_VIEW_ID)
        self.assertEqual(config.application_name, DEFAULT_APPLICATION_NAME)
        self.assertIsNone(config.store_id)

    @patch.dict(os.environ, {
        'GA_KEY_FILE_LOCATION': '/etc/ga/key.json',
        'GA_VIEW_ID': '555',
        'GA_APPLICATION_NAME': 'Orders Dashboard',
        'GA_STORE_ID': 'store-1'
    }, clear=True)
    def test_environment(self):
        config = load_config()

        self.assertEqual(config.key_file_path, '/etc/ga/key.json')
        self.assertEqual(config.view_id, '555')
        self.assertEqual(config.application_name, 'Orders Dashboard')
        self.assertEqual(config.store_id, 'store-1')

    @patch.dict(os.environ, {'GA_VIEW_ID': '555'}, clear=True)
    def test_arguments_override_environment(self):
        config = load_config(view_id='777', key_file_path='key.json')

        self.assertEqual(config.view_id, '777')
        self.assertEqual(config.key_file_path, 'key.json')

    @patch.dict(os.environ, {}, clear=True)
    def test_blank_view_id(self):
        with self.assertRaises(ValueError):
            load_config(view_id='   ')

    @patch.dict(os.environ, {}, clear=True)
    def test_empty_view_id_is_not_replaced_by_default(self):
        with self.assertRaises(ValueError):
            load_config(view_id='')

    @patch.dict(os.environ, {'GA_VIEW_ID': ''}, clear=True)
    def test_empty_view_id_from_environment(self):
        with self.assertRaises(ValueError):
            load_config()

    @patch.dict(os.environ, {'GA_STORE_ID': ''}, clear=True)
    def test_empty_store_id_disables_store_filter(self):
        self.assertIsNone(load_config().store_id)


if __name__ == '__main__':
    unittest.main()
