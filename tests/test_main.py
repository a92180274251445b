"""
Test Command Line
=================

Unit tests for the command-line modes.
"""

import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from iso_dictionaries import config, dictionaries_exist
from iso_dictionaries.__main__ import main


class TestMain(unittest.TestCase):
    """Test cases for main() mode dispatch."""

    def setUp(self):
        """Set up test environment."""
        self.test_dir = Path(tempfile.mkdtemp())
        self.original_dict_dir = config.DICT_DIR
        config.DICT_DIR = self.test_dir
        patcher = patch('iso_dictionaries.__main__.setup_logging')
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        """Clean up test environment."""
        shutil.rmtree(self.test_dir)
        config.DICT_DIR = self.original_dict_dir

    def run_main(self, *args):
        output = io.StringIO()
        with redirect_stdout(output):
            code = main(list(args))
        return code, output.getvalue()

    def test_no_arguments(self):
        """Usage is printed without a mode."""
        code, output = self.run_main()
        self.assertEqual(code, 1)
        self.assertIn('Available modes', output)

    def test_unknown_mode(self):
        code, output = self.run_main('translate', 'GB')
        self.assertEqual(code, 1)
        self.assertIn('Unknown mode', output)

    def test_lookup(self):
        """Lookup searches every domain by default."""
        code, output = self.run_main('lookup', 'GB')
        self.assertEqual(code, 0)
        self.assertIn('United Kingdom', output)

        code, output = self.run_main('lookup', '826')
        self.assertEqual(code, 0)
        self.assertIn('GBR', output)
        self.assertIn('Pound sterling', output)

    def test_lookup_in_domain(self):
        code, output = self.run_main('lookup', 'FR', 'language')
        self.assertEqual(code, 0)
        self.assertIn('French', output)
        self.assertNotIn('France', output)

    def test_lookup_failure(self):
        """Errors are reported per domain."""
        code, output = self.run_main('lookup', 'ZZ', 'country')
        self.assertEqual(code, 1)
        self.assertIn("'ZZ'", output)

    def test_list(self):
        code, output = self.run_main('list', 'currency')
        self.assertEqual(code, 0)
        self.assertEqual(len(output.splitlines()), 179)

    def test_relations(self):
        """Country relations list currencies and languages."""
        code, output = self.run_main('relations', 'CH')
        self.assertEqual(code, 0)
        self.assertIn('Swiss franc', output)
        self.assertIn('Romansh', output)

        code, output = self.run_main('relations', 'GBP', 'currency')
        self.assertEqual(code, 0)
        self.assertIn('Jersey', output)

        code, output = self.run_main('relations', 'ZZ')
        self.assertEqual(code, 1)

    def test_export_and_check(self):
        """Export writes dictionaries that the check accepts."""
        code, output = self.run_main('export')
        self.assertEqual(code, 0)
        self.assertTrue(dictionaries_exist())
        self.assertIn('country_currency', output)

        code, output = self.run_main('check')
        self.assertEqual(code, 0)
        self.assertIn('persisted', output)
        self.assertNotIn('FAILED', output)


if __name__ == '__main__':
    unittest.main()
