"""The five convention classifiers."""

from .architecture import classify_architecture
from .domain import classify_domain
from .naming import classify_naming
from .patterns import classify_patterns
from .testing import classify_testing

__all__ = [
    "classify_architecture",
    "classify_domain",
    "classify_naming",
    "classify_patterns",
    "classify_testing",
]
