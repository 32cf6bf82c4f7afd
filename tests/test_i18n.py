import unittest

from tests._test_path import SRC  # noqa: F401

from imagerules.adapters.i18n import CatalogTranslator, replace_placeholders


class TestCatalogTranslator(unittest.TestCase):
    def test_between_keeps_numbered_placeholders_apart(self):
        t = CatalogTranslator()
        self.assertEqual(t.translate("between", {"size1": 10, "size2": 20}), "between 10 and 20 pixels")

    def test_unknown_key_falls_back_to_key(self):
        self.assertEqual(CatalogTranslator().translate("nope"), "nope")

    def test_unknown_locale_falls_back_to_default(self):
        t = CatalogTranslator(locale="xx")
        self.assertEqual(t.translate("any-size"), "any size")

    def test_custom_catalog(self):
        t = CatalogTranslator(
            default_locale="de",
            _translations={"de": {"equal": ":size Pixel"}},
        )
        self.assertEqual(t.translate("equal", {"size": 5}), "5 Pixel")

    def test_replace_placeholders_longest_first(self):
        self.assertEqual(replace_placeholders(":size/:size1", {"size": "a", "size1": "b"}), "a/b")
