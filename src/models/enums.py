"""
Enum definitions for the Sales API
"""

from enum import Enum

class ErrorType(str, Enum):
    """
    Failure categories reported by the order store.

    - NOT_FOUND: the addressed entity id does not exist
    - INVALID_REFERENCE: a foreign id (customer, order, product) does not exist
    - BAD_REQUEST: path/body id mismatch or an otherwise unusable request
    """
    NOT_FOUND = "NOT_FOUND"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    BAD_REQUEST = "BAD_REQUEST"
