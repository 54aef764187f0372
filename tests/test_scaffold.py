"""Smoke tests: verify package wiring.

These tests prove that:
* The version is accessible and semver-like.
* The exception hierarchy is correctly structured.
* Exit codes are defined.
* The CLI entry point routes its top-level commands.
"""

from __future__ import annotations

import pytest

from commons_lang import __version__
from commons_lang.cli import exit_codes
from commons_lang.cli.app import main
from commons_lang.exceptions import (
    CommonsLangError,
    DependencyMissingError,
    InvalidArgumentError,
    InvalidPaddingCharacterError,
    InvalidWidthError,
    UnknownOperationError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidArgumentError,
            InvalidPaddingCharacterError,
            InvalidWidthError,
            UnknownOperationError,
            DependencyMissingError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CommonsLangError]
    ) -> None:
        assert issubclass(exc_class, CommonsLangError)

    @pytest.mark.parametrize(
        "exc_class", [InvalidPaddingCharacterError, InvalidWidthError],
    )
    def test_validation_errors_are_invalid_arguments(
        self, exc_class: type[CommonsLangError]
    ) -> None:
        assert issubclass(exc_class, InvalidArgumentError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CommonsLangError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CommonsLangError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = CommonsLangError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "commons-lang" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_list_routes_to_catalog(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from commons_lang.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_list", lambda: exit_codes.SUCCESS)
        assert main(["list"]) == exit_codes.SUCCESS

    def test_operation_routes_with_arguments(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from commons_lang.cli import app as app_module

        seen: list[tuple[str, list[str]]] = []

        def _fake(name: str, raw_args: list[str]) -> int:
            seen.append((name, raw_args))
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_operation", _fake)
        code = main(["rotate", "abc", "1"])
        assert code == exit_codes.SUCCESS
        assert seen == [("rotate", ["abc", "1"])]
