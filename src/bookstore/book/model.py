from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Book:
    """A book row. ``id`` stays None until the store assigns one."""

    title: str
    price: Decimal
    id: Optional[int] = None
