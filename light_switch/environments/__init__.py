"""
Environments: the worlds prisoners live in.
"""

from .prison import Prison, PrisonConfig, PrisonStatus

__all__ = ["Prison", "PrisonConfig", "PrisonStatus"]
