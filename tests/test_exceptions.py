"""Tests for domain exception hierarchy."""

from __future__ import annotations

import unittest

from adaptorkit.exceptions import (
    AdaptorKitError,
    ConfigValidationError,
    MissingConnectorError,
    RelayDefinitionError,
)


class ExceptionHierarchyTests(unittest.TestCase):
    """Validate exception inheritance contract."""

    def test_exception_hierarchy(self) -> None:
        self.assertTrue(issubclass(RelayDefinitionError, AdaptorKitError))
        self.assertTrue(issubclass(MissingConnectorError, AdaptorKitError))
        self.assertTrue(issubclass(ConfigValidationError, AdaptorKitError))

    def test_builtin_bases_are_kept(self) -> None:
        self.assertTrue(issubclass(RelayDefinitionError, ValueError))
        self.assertTrue(issubclass(MissingConnectorError, AttributeError))


if __name__ == "__main__":
    unittest.main()
