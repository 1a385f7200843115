"""Exceptions raised by ShopTree.

Expected outcomes (duplicate names, missing items, blank input) are
reported through OperationResult and never raise. These exceptions are
for misuse: unknown strategy names and invalid configuration.
"""


class ShopTreeError(Exception):
    """Base class for all ShopTree errors."""
    pass


class UnknownOrderingError(ShopTreeError, ValueError):
    """Raised when an ordering mode name is not recognized."""
    pass


class UnknownTraversalError(ShopTreeError, ValueError):
    """Raised when a traversal order name is not recognized."""
    pass


class ConfigurationError(ShopTreeError):
    """Raised when a ShopTreeConfig fails validation."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")
