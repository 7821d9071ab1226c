import unittest
import warnings

from piracychecker.lib.pirate_app import AppCategory, PirateApp


class TestPirateApp(unittest.TestCase):
    def test_package_name_joins_fragments(self):
        app = PirateApp("Lucky Patcher", ["com.", "forpda.", "lp"])

        self.assertEqual(app.package_name, "com.forpda.lp")

    def test_package_name_keeps_order_and_duplicates(self):
        app = PirateApp("Echo", ["b", "a", "b", "a"])

        self.assertEqual(app.package_name, "baba")

    def test_empty_fragments(self):
        app = PirateApp("X", [])

        self.assertEqual(app.package_name, "")

    def test_name_unmodified(self):
        self.assertEqual(PirateApp("  Game Killer ", ["a"]).name, "  Game Killer ")
        self.assertEqual(PirateApp("", ["a"]).name, "")

    def test_default_category(self):
        self.assertIs(PirateApp("X", ["a"]).category, AppCategory.OTHER)

    def test_explicit_category(self):
        app = PirateApp("Aptoide", ["cm.", "aptoide.", "pt"], AppCategory.STORE)

        self.assertIs(app.category, AppCategory.STORE)

    def test_fragments_are_copied(self):
        pack = ["com.", "forpda.", "lp"]
        app = PirateApp("Lucky Patcher", pack)

        pack.append(".extra")
        pack[0] = "org."

        self.assertEqual(app.package_name, "com.forpda.lp")

    def test_accepts_any_sequence(self):
        self.assertEqual(PirateApp("T", ("cc.", "madkite.", "freedom")).package_name, "cc.madkite.freedom")

    def test_package_name_is_stable(self):
        app = PirateApp("Freedom", ["cc.", "madkite.", "freedom"])

        self.assertEqual(app.package_name, app.package_name)

    def test_read_only(self):
        app = PirateApp("X", ["a"])

        with self.assertRaises(AttributeError):
            app.name = "Y"
        with self.assertRaises(AttributeError):
            app.category = AppCategory.STORE
        with self.assertRaises(AttributeError):
            app.package_name = "b"

    def test_deprecated_package_alias(self):
        app = PirateApp("Lucky Patcher", ["com.", "forpda.", "lp"])

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            value = app.package

        self.assertEqual(value, app.package_name)
        self.assertEqual(len(caught), 1)
        self.assertTrue(issubclass(caught[0].category, DeprecationWarning))

    def test_equality_and_hash(self):
        a = PirateApp("Freedom", ["cc.", "madkite.", "freedom"])
        b = PirateApp("Freedom", ["cc.", "madkite.", "freedom"])
        c = PirateApp("Freedom", ["cc.madkite.", "freedom"])

        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, c)
        self.assertNotEqual(a, PirateApp("Freedom", ["cc.", "madkite.", "freedom"], AppCategory.STORE))
        self.assertNotEqual(a, "cc.madkite.freedom")

    def test_repr(self):
        app = PirateApp("Aptoide", ["cm.", "aptoide.", "pt"], AppCategory.STORE)

        self.assertEqual(repr(app), "PirateApp(name='Aptoide', package_name='cm.aptoide.pt', category=STORE)")


class TestAppCategory(unittest.TestCase):
    def test_from_str(self):
        self.assertIs(AppCategory.from_str("store"), AppCategory.STORE)
        self.assertIs(AppCategory.from_str(" OTHER "), AppCategory.OTHER)

    def test_from_str_unknown(self):
        with self.assertRaises(ValueError):
            AppCategory.from_str("emulator")
