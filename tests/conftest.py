"""Shared pytest configuration for the commons-lang test suite.

Guidelines
----------
* Core tests are pure function calls: no mocking, no I/O.
* CLI tests drive :func:`commons_lang.cli.app.main` with an explicit
  argv and read output through ``capsys``.
* Tests must not depend on OS state or on Rich being installed,
  except where a test masks Rich on purpose.
"""

from __future__ import annotations
