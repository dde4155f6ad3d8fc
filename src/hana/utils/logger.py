"""Logger lookup for Hana modules.

Every module logs through the ``hana`` namespace so a host application can
tune the whole library with one ``logging.getLogger("hana")`` call. Hana
emits debug messages only and never installs handlers.

Example:
    >>> import logging
    >>> logging.getLogger("hana").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name, placed under ``hana.``.

    Names already inside the namespace (``hana`` or ``hana.*``) are used
    as given, so ``get_logger(__name__)`` works from any Hana module.

    Example:
        >>> get_logger("loader").name
        'hana.loader'
    """
    if not (name == "hana" or name.startswith("hana.")):
        name = f"hana.{name}"
    return logging.getLogger(name)
