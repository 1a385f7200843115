"""Common components shared across ShopTree.

This internal package holds the configuration layer. It should NOT be
imported directly by users.

Important: This package must NEVER import from core or api to avoid
circular dependencies.
"""

from .config import (
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
