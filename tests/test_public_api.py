"""Tests for the joker public API surface.

Verifies that all expected names are importable from the top-level
``joker`` package and that ``__all__`` is comprehensive.
"""

from __future__ import annotations

import re

import joker


class TestPublicAPIImports:
    """Every public component must be importable from ``import joker``."""

    # -- Core --

    def test_wildcard_importable(self) -> None:
        """Wildcard is exported at the top level."""
        from joker import Wildcard

        assert Wildcard is not None

    def test_compile_returns_wildcard(self) -> None:
        """joker.compile() builds a Wildcard."""
        from joker import Wildcard, compile

        assert isinstance(compile("a*"), Wildcard)

    def test_quote_and_escape_are_same(self) -> None:
        """escape is an alias of quote."""
        from joker import escape, quote

        assert quote is escape

    def test_compile_shadows_builtin_only_in_namespace(self) -> None:
        """joker.compile does not replace the builtin compile."""
        import builtins

        assert joker.compile is not builtins.compile

    # -- Collections and config --

    def test_wildcard_list_importable(self) -> None:
        """WildcardList is exported at the top level."""
        from joker import WildcardList

        assert WildcardList is not None

    def test_config_importable(self) -> None:
        """Config is exported at the top level."""
        from joker import Config

        assert Config is not None

    # -- Errors --

    def test_errors_share_base(self) -> None:
        """Every exported error derives from WildcardError."""
        from joker import (
            ConfigError,
            ConfigNotFoundError,
            InvalidInputError,
            PatternFileError,
            WildcardError,
        )

        for error_type in (ConfigError, ConfigNotFoundError, InvalidInputError, PatternFileError):
            assert issubclass(error_type, WildcardError)

    # -- Version --

    def test_version_is_set(self) -> None:
        """__version__ is a semantic version string."""
        assert hasattr(joker, "__version__")
        assert isinstance(joker.__version__, str)
        assert re.match(r"^\d+\.\d+\.\d+", joker.__version__)


class TestPublicAPIAll:
    """Verify __all__ is comprehensive and matches actual exports."""

    EXPECTED_NAMES = {
        # Core
        "Wildcard",
        "compile",
        "quote",
        "escape",
        "translate",
        # Collections
        "WildcardList",
        # Config
        "Config",
        # Errors
        "ErrorCodes",
        "WildcardError",
        "InvalidInputError",
        "ConfigError",
        "ConfigNotFoundError",
        "PatternFileError",
        # Utilities
        "match_pattern",
        "filter_names",
    }

    def test_all_contains_all_expected_names(self) -> None:
        """__all__ lists every expected name."""
        actual = set(joker.__all__)
        missing = self.EXPECTED_NAMES - actual
        assert not missing, f"Missing from __all__: {missing}"

    def test_all_has_no_unexpected_extras(self) -> None:
        """__all__ lists nothing unexpected."""
        actual = set(joker.__all__)
        extra = actual - self.EXPECTED_NAMES
        assert not extra, f"Unexpected names in __all__: {extra}"

    def test_all_names_are_importable(self) -> None:
        """Every name in __all__ resolves on the package."""
        _MISSING = object()
        for name in joker.__all__:
            obj = getattr(joker, name, _MISSING)
            assert obj is not _MISSING, f"Name '{name}' listed in __all__ but not found on module"
