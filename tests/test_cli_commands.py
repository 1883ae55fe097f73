"""
CLI Command Extensions for Flask
"""
import os
import shutil
import tempfile
from unittest import TestCase
from unittest.mock import patch
from wsgi import app
from service.models import StorageWriteError


class TestFlaskCLI(TestCase):
    """Flask CLI Command Tests"""

    def setUp(self):
        self.runner = app.test_cli_runner()
        self.saved_stocks_file = app.config["STOCKS_FILE"]
        self.tmp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp_dir, "Dat", "dat.xml")
        app.config["STOCKS_FILE"] = self.path

    def tearDown(self):
        app.config["STOCKS_FILE"] = self.saved_stocks_file
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_init_store(self):
        """It should create an empty collection"""
        result = self.runner.invoke(args=["init-store"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Created empty collection", result.output)
        with open(self.path, "r", encoding="utf-8") as xml_file:
            self.assertIn("<stocks", xml_file.read())

    def test_init_store_existing(self):
        """It should leave an existing collection alone"""
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as xml_file:
            xml_file.write("<stocks><stock><title>A</title></stock></stocks>")
        result = self.runner.invoke(args=["init-store"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("already exists", result.output)
        with open(self.path, "r", encoding="utf-8") as xml_file:
            self.assertIn("<title>A</title>", xml_file.read())

    def test_init_store_force(self):
        """It should reset an existing collection with --force"""
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as xml_file:
            xml_file.write("<stocks><stock><title>A</title></stock></stocks>")
        result = self.runner.invoke(args=["init-store", "--force"])
        self.assertEqual(result.exit_code, 0)
        with open(self.path, "r", encoding="utf-8") as xml_file:
            self.assertNotIn("<title>", xml_file.read())

    @patch("service.models.StockStore.init_store")
    def test_init_store_failure(self, init_mock):
        """It should exit with an error when the file cannot be written"""
        init_mock.side_effect = StorageWriteError("read-only file system")
        result = self.runner.invoke(args=["init-store"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("read-only file system", result.output)
