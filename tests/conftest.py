# topmark:header:start
#
#   project      : ProlMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ProlMark test suite.

Sets up typed mark helpers, shared source fixtures and a TRACE-level logging
configuration so that engine state transitions show up in failure reports.

Notes:
    Build configs with `prolmark.config.model.MutableConfig` and `freeze()`
    them; never mutate a frozen `Config` (use `Config.thaw()`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from prolmark.config import logging
from prolmark.config.model import MutableConfig

if TYPE_CHECKING:
    from prolmark.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_prolmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear ``PROLMARK_LOG_LEVEL``.
    """
    monkeypatch.delenv("PROLMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``.

    Args:
        **overrides (Any): Field values applied on top of the defaults.

    Returns:
        Config: The frozen configuration.
    """
    draft = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, list(value) if key == "dialects" else value)
    return draft.freeze()


# A legacy ADAM/SSE routine whose prologue ends at an implicit terminator.
ADAMSSE_FORTRAN = """\
      SUBROUTINE KPG1_AXBN( NDIM, LABEL, AXIS, STATUS )
*+  KPG1_AXBN - Determines the number of an axis with given label
*    Description :
*     Looks up the axis whose label matches.
*    Arguments :
*     NDIM = INTEGER (Given)
*        Number of axes.
*    Authors :
*     MJC: Malcolm J. Currie (STARLINK)
*    History :
*     1990 Jan 5 (MJC):
*        Original version.
*    endhistory
*    Type Definitions :
      IMPLICIT NONE
*    Status :
      INTEGER STATUS
      END
"""

# The same routine in the canonical layout (no placeholder sections).
STARLSE_FORTRAN = """\
      SUBROUTINE KPG1_AXBN( NDIM, LABEL, AXIS, STATUS )
*+
*  Name:
*     KPG1_AXBN

*  Purpose:
*     Determines the number of an axis with given label

*  Language:
*     Starlink Fortran 77

*  Description:
*     Looks up the axis whose label matches.

*  Arguments:
*     NDIM = INTEGER (Given)
*        Number of axes.

*  Authors:
*     MJC: Malcolm J. Currie (STARLINK)

*  History:
*     1990 Jan 5 (MJC):
*        Original version.

*-
*    Type Definitions :
      IMPLICIT NONE
*    Status :
      INTEGER STATUS
      END
"""

# A shell script prologue closed by an explicit terminator.
ADAMSSE_SCRIPT = """\
#!/bin/sh
#+  mkdist - Build a distribution tarball
#    Description :
#     Collects the files listed in MANIFEST.
#    Authors :
#     PWD: Peter W. Draper (Starlink)
#-
tar cf dist.tar `cat MANIFEST`
"""
