# Weakmd project, MIT license.
#
# Derived from Yuio, https://github.com/taminomara/yuio/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

r"""
Weakmd converts a small in-house markdown dialect into HTML::

    >>> parse("# Hello\n* _one_\n* __two__\n")
    '<h1>Hello</h1><ul><li><em>one</em></li><li><strong>two</strong></li></ul>'

The parser lives in :mod:`weakmd.md`, and the shared input view it runs on
lives in :mod:`weakmd.cursor`.


Diagnostics
-----------

Conversion never fails. When some part of the input can't be parsed, it is dropped,
and an :class:`~weakmd.md.UnparsedRemainderWarning` is issued. Warnings from
this library are ignored unless internal logging is enabled, either by calling
:func:`enable_internal_logging`, or by setting ``WEAKMD_DEBUG``
or ``WEAKMD_DEBUG_FILE`` environment variables.

.. autoclass:: WeakmdWarning

.. autofunction:: enable_internal_logging

"""

from __future__ import annotations

import logging as _logging
import os as _os
import sys as _sys
import warnings

__all__ = [
    "WeakmdWarning",
    "enable_internal_logging",
    "parse",
]


class WeakmdWarning(RuntimeWarning):
    """
    Base class for all runtime warnings.

    """


_logger = _logging.getLogger("weakmd.internal")
_logger.propagate = False

__stderr_handler = _logging.StreamHandler(_sys.__stderr__)
__stderr_handler.setLevel("CRITICAL")
_logger.addHandler(__stderr_handler)


def enable_internal_logging(
    path: str | None = None, level: str | int | None = None, propagate=None
):
    """
    Enable Weakmd's internal logging.

    This function enables :func:`logging.captureWarnings`, enables printing
    of :class:`WeakmdWarning` messages, and sets up logging channels
    ``weakmd.internal`` and ``py.warnings``.

    :param path:
        if given, adds handlers that output internal log messages to the given file.
    :param level:
        configures logging level for file handler. Default is ``DEBUG``.
    :param propagate:
        if given, enables or disables log message propagation from ``weakmd.internal``
        and ``py.warnings`` to the root logger.

    """

    if path:
        if level is None:
            level = _os.environ.get("WEAKMD_DEBUG", "").strip().upper() or "DEBUG"
        if level in ["1", "Y", "YES", "TRUE"]:
            level = "DEBUG"
        file_handler = _logging.FileHandler(path, delay=True)
        file_handler.setFormatter(
            _logging.Formatter("%(filename)s:%(lineno)d: %(levelname)s: %(message)s")
        )
        file_handler.setLevel(level)
        _logger.addHandler(file_handler)
        _logging.getLogger("py.warnings").addHandler(file_handler)

    _logging.captureWarnings(True)
    warnings.simplefilter("default", category=WeakmdWarning)

    if propagate is not None:
        _logging.getLogger("py.warnings").propagate = propagate
        _logger.propagate = propagate


_debug = "WEAKMD_DEBUG" in _os.environ or "WEAKMD_DEBUG_FILE" in _os.environ
if _debug:
    enable_internal_logging(
        path=_os.environ.get("WEAKMD_DEBUG_FILE") or "weakmd.log", propagate=False
    )
else:
    warnings.simplefilter("ignore", category=WeakmdWarning, append=True)


from weakmd.md import parse  # noqa: E402
