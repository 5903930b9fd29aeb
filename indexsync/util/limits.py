"""Process resource limits for long-running operator commands."""

import logging
import sys

logger = logging.getLogger(__name__)


def raise_resource_limits() -> None:
    """Raise the soft CPU-time and address-space limits to their hard limits.

    Advisory only: platforms without POSIX rlimits are left untouched.
    """
    if sys.platform == "win32":
        return

    import resource

    for name in ("RLIMIT_CPU", "RLIMIT_AS"):
        limit = getattr(resource, name, None)
        if limit is None:
            continue
        soft, hard = resource.getrlimit(limit)
        if soft == hard:
            continue
        try:
            resource.setrlimit(limit, (hard, hard))
            logger.debug(f"Raised {name} soft limit from {soft} to {hard}")
        except (ValueError, OSError) as e:
            logger.warning(f"Could not raise {name}: {e}")
