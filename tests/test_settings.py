import io
import unittest
from contextlib import redirect_stdout

from easydelay.common import VERBOSITY_MAX, VERBOSITY_ERROR, VERBOSITY_NONE, VERBOSITY_DEBUG
from easydelay.logging import get_logger, Logger
from easydelay.settings import set_setting, get_setting, Settings, SETTINGS, \
    add_setting_callback, remove_settings_callback
from easydelay.utils.mathematics import rangify


class TestSettings(unittest.TestCase):

    def tearDown(self):
        set_setting(Settings.VERBOSITY, VERBOSITY_ERROR)

    def test_keys(self):
        self.assertIn(Settings.VERBOSITY, SETTINGS)
        self.assertIn(Settings.COLORS, SETTINGS)

    def test_verbosity_bounded(self):
        set_setting(Settings.VERBOSITY, 42)
        self.assertEqual(get_setting(Settings.VERBOSITY), VERBOSITY_MAX)
        set_setting(Settings.VERBOSITY, "-3")
        self.assertEqual(get_setting(Settings.VERBOSITY), VERBOSITY_NONE)

    def test_invalid(self):
        self.assertRaises(ValueError, set_setting, "nope", 1)
        self.assertRaises(ValueError, set_setting, Settings.VERBOSITY, "loud")
        self.assertRaises(ValueError, set_setting, Settings.COLORS, "maybe")

    def test_callback_lazy(self):
        changes = []

        def on_change(key, value):
            changes.append((key, value))

        add_setting_callback(Settings.VERBOSITY, on_change)
        try:
            set_setting(Settings.VERBOSITY, VERBOSITY_DEBUG)
            set_setting(Settings.VERBOSITY, VERBOSITY_DEBUG)
        finally:
            remove_settings_callback(on_change)

        self.assertEqual(changes, [(Settings.VERBOSITY, VERBOSITY_DEBUG)])

    def test_rangify(self):
        self.assertEqual(rangify(7, 0, 5), 5)
        self.assertEqual(rangify(-1, 5, 0), 0)
        self.assertEqual(rangify(3, 0, 5), 3)


class TestLogging(unittest.TestCase):

    def tearDown(self):
        set_setting(Settings.VERBOSITY, VERBOSITY_ERROR)

    def _capture(self, logger: Logger, level: str, msg: str) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            getattr(logger, level)(msg)
        return out.getvalue()

    def test_cached(self):
        self.assertIs(get_logger("tests.a"), get_logger("tests.a"))

    def test_global_verbosity(self):
        log = get_logger("tests.global")
        self.assertIn("boom", self._capture(log, "e", "boom"))
        self.assertEqual(self._capture(log, "d", "details"), "")

        set_setting(Settings.VERBOSITY, VERBOSITY_DEBUG)
        s = self._capture(log, "d", "details")
        self.assertIn("[DEBUG]", s)
        self.assertIn("{tests.global:", s)

    def test_own_level(self):
        log = Logger("tests.own", level=VERBOSITY_NONE)
        self.assertEqual(self._capture(log, "e", "boom"), "")


if __name__ == '__main__':
    unittest.main()
