"""
Domain models and value objects.

Contains immutable value holders: ScalarValueHolder, DefensiveCollectionHolder.
"""

from src.core.domain.collection import DefensiveCollectionHolder
from src.core.domain.scalar_value import ScalarValueHolder

__all__ = [
    # Scalar value
    "ScalarValueHolder",
    # Collection with defensive copying
    "DefensiveCollectionHolder",
]
