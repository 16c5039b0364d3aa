"""
Caller-supplied stake state
"""

from .stake import Day, Hearts, StakeRecord

__all__ = [
    "Day",
    "Hearts",
    "StakeRecord",
]
