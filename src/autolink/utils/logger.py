"""Logger lookup under the ``autolink`` namespace.

Every module logs through ``get_logger(__name__)``. Applications silence or
enable the whole package with ``logging.getLogger("autolink")``. The
pipeline only emits DEBUG records: suppressed candidates, callback
fallbacks and per-call link counts.
"""

from __future__ import annotations

import logging

_ROOT = "autolink"


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for ``name`` under ``autolink.``.

    Names already inside the namespace are used as-is:

        >>> get_logger("autolink.linker").name
        'autolink.linker'
        >>> get_logger("plugins").name
        'autolink.plugins'
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
