from enum import Enum
from dataclasses import dataclass
from decimal import Decimal


class Category(str, Enum):
    STANDARD = "STANDARD"
    DELUXE = "DELUXE"
    SUITE = "SUITE"


@dataclass(frozen=True)
class Room:
    room_id: int
    category: Category
    price_per_night: Decimal

    def __post_init__(self):
        if self.price_per_night < 0:
            raise ValueError("price_per_night cannot be negative")

    def __str__(self):
        return (
            f"Room[{self.room_id}] {self.category.value} - "
            f"{self.price_per_night:.2f} per night"
        )
