"""Reference letter distributions."""

from caesar_breaker.services.tables.probability import ENGLISH, GERMAN, ProbabilityTable
from caesar_breaker.services.tables.registry import TableRegistry

__all__ = [
    "ENGLISH",
    "GERMAN",
    "ProbabilityTable",
    "TableRegistry",
]
