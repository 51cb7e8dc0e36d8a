"""
Shared field types for the sales models
"""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Decimal in memory, decimal string on the wire so amounts round-trip exactly
Money = Annotated[Decimal, PlainSerializer(str, return_type=str, when_used="json")]
