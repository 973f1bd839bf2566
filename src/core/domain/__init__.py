"""
Domain models.

Qualitative domains (ordered linguistic labels) and their factories.
"""

from src.core.domain.factories import qualitative_domain, symmetric_domain
from src.core.domain.qualitative import QualitativeDomain

__all__ = [
    # Qualitative domain
    "QualitativeDomain",
    # Factories
    "qualitative_domain",
    "symmetric_domain",
]
