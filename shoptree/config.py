"""Configuration re-export.

Users import configuration from here; the definitions live in the
_common package.
"""

from ._common.config import (
    ShopTreeConfig,
    OrderingMode,
    TraversalOrder,
    HIGHEST_PRIORITY,
    LOWEST_PRIORITY,
)

__all__ = [
    'ShopTreeConfig',
    'OrderingMode',
    'TraversalOrder',
    'HIGHEST_PRIORITY',
    'LOWEST_PRIORITY',
]
