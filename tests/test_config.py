import os
import unittest
import tempfile
import textwrap
from unittest.mock import patch
from piracychecker.lib.logger import Logger
from piracychecker.lib.config import Config

class TestConfig(unittest.TestCase):
    def setUp(self):
        fd, path = tempfile.mkstemp(prefix="piracychecker_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(textwrap.dedent(
                """
                    [detection]
                    include_stores = false       
                    extra_packages = com.example.a, ,com.example.b   # trailing comment

                    [dev]
                    log_level = debug          
                    stack_trace_errors = true
                """
            ).lstrip())
        
        self.path = path
        Config.load(self.path)
    
    def tearDown(self):
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
    
    def test_loaded(self):
        self.assertEqual(Config.get("detection", "include_stores"), False)
        self.assertEqual(Config.get("detection", "extra_packages"), ["com.example.a", "com.example.b"])
        self.assertEqual(Config.get("dev", "log_level"), Logger.DEBUG)
        self.assertEqual(Config.get("dev", "stack_trace_errors"), True)
    
    def test_fallback(self):
        self.assertIsNone(Config.get("detection", "unknown"))
        self.assertEqual(Config.get("detection", "new_property", "new_value"), "new_value")
        self.assertEqual(Config.get("unknown_category", "unknown_property", "unknown_value"), "unknown_value")
    
    def test_load_missing_config(self):
        missing = os.path.join(tempfile.gettempdir(), "definitely_not_here.cfg")
        with patch("piracychecker.lib.logger.Logger.warning") as warn:
            Config.load(missing)
            warn.assert_called()
        
        self.assertEqual(Config.get("detection", "include_stores"), True)
        self.assertEqual(Config.get("detection", "extra_packages"), [])
        self.assertEqual(Config.get("dev", "log_level"), Logger.INFO)

    def test_load_wrong_extension(self):
        with patch("piracychecker.lib.logger.Logger.warning") as warn:
            Config.load(__file__)
            warn.assert_called_once()

        self.assertEqual(Config.get("dev", "stack_trace_errors"), False)

    def test_load_without_section_header(self):
        fd, path = tempfile.mkstemp(prefix="piracychecker_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("include_stores = false\n")

        try:
            with patch("piracychecker.lib.logger.Logger.warning") as warn:
                Config.load(path)
                warn.assert_called_once()
        finally:
            os.remove(path)

        self.assertEqual(Config.get("detection", "include_stores"), True)

    def test_env_override(self):
        with patch.dict(os.environ, {"PIRACYCHECKER_CONFIG": self.path}):
            self.assertEqual(Config._resolve_config_path(), self.path)

    def test_invalid_log_level(self):
        fd, path = tempfile.mkstemp(prefix="piracychecker_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("[dev]\nlog_level = loud\n")

        try:
            with self.assertRaises(ValueError):
                Config.load(path)
        finally:
            os.remove(path)

    def test_not_loaded(self):
        with patch.object(Config, "_data", None):
            with self.assertRaises(RuntimeError):
                Config.get("dev", "log_level")

    def test_is_loaded(self):
        self.assertTrue(Config.is_loaded())

        with patch.object(Config, "_data", None):
            self.assertFalse(Config.is_loaded())

    def test_default_ignores_loaded_file(self):
        self.assertEqual(Config.default("detection", "include_stores"), True)
        self.assertEqual(Config.default("detection", "extra_packages"), [])
        self.assertEqual(Config.default("dev", "log_level"), Logger.INFO)
        self.assertEqual(Config.default("dev", "unknown", "fallback"), "fallback")
