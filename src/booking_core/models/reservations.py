from enum import Enum
from dataclasses import dataclass
from datetime import date
from decimal import Decimal


class ReservationStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    FAILED_PAYMENT = "FAILED_PAYMENT"


@dataclass
class Reservation:
    reservation_id: str
    room_id: int
    guest_name: str
    checkin: date
    checkout: date
    amount: Decimal
    status: ReservationStatus

    def __post_init__(self):
        if self.checkout <= self.checkin:
            raise ValueError("checkout must be after checkin")
        if self.amount < 0:
            raise ValueError("amount cannot be negative")

    @property
    def nights(self) -> int:
        return (self.checkout - self.checkin).days

    @property
    def occupies_room(self) -> bool:
        """Only confirmed stays block the room for other guests."""
        if self.status is ReservationStatus.CONFIRMED:
            return True
        if self.status in (
            ReservationStatus.CANCELLED,
            ReservationStatus.FAILED_PAYMENT,
        ):
            return False
        raise ValueError(f"Unhandled reservation status {self.status}")

    def overlaps(self, checkin: date, checkout: date) -> bool:
        # half-open: the checkout day itself is free
        return self.checkin < checkout and checkin < self.checkout

    def __str__(self):
        return (
            f"Reservation[{self.reservation_id}] Guest: {self.guest_name}, "
            f"Room: {self.room_id}, {self.checkin.isoformat()} -> "
            f"{self.checkout.isoformat()}, Amount: {self.amount:.2f}, "
            f"Status: {self.status.value}"
        )
