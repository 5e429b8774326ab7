"""
Shared logging configuration and debug selector.
"""

import logging

from catalog_codepoints.config.debug import DebugFlag

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger("catalog_codepoints")

_debug_selector = DebugFlag.FILES


def set_debug_selector(selector: int) -> DebugFlag:
    """
    Set the debug selector bitmask.

    Any category beyond FILES lowers the logger to DEBUG so the
    gated messages become visible.
    """
    global _debug_selector
    _debug_selector = DebugFlag(selector & DebugFlag.ALL)
    if _debug_selector & (DebugFlag.ALL ^ DebugFlag.FILES):
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    return _debug_selector


def debug_enabled(flag: DebugFlag) -> bool:
    """Check whether a debug category is selected."""
    return bool(_debug_selector & flag)
