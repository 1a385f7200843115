"""Testing utilities for ShopTree consumers."""

from .fixtures import TreeShapeHelper

__all__ = ['TreeShapeHelper']
