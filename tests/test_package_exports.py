"""Tests for top-level package lazy exports."""

from __future__ import annotations

import unittest

import adaptorkit


class PackageExportTests(unittest.TestCase):
    """Ensure __getattr__ and exported symbols behave as expected."""

    def test_lazy_exports_resolve_known_symbols(self) -> None:
        for name in adaptorkit.__all__:
            self.assertIsNotNone(getattr(adaptorkit, name), name)
        self.assertTrue(callable(adaptorkit.load_settings))
        self.assertTrue(callable(adaptorkit.init_config_store))

    def test_unknown_symbol_raises_attribute_error(self) -> None:
        with self.assertRaises(AttributeError):
            getattr(adaptorkit, "THIS_DOES_NOT_EXIST")


if __name__ == "__main__":
    unittest.main()
