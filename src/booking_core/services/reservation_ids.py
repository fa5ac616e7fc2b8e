import random
from typing import Collection

from booking_core.schemas.reservations import RESERVATION_ID_REGEX
from booking_core.utils.constants import (
    RESERVATION_ID_PREFIX,
    RESERVATION_ID_MIN,
    RESERVATION_ID_MAX,
)
from booking_core.utils.custom_exceptions import ReservationIdsExhausted

ID_SPACE = RESERVATION_ID_MAX - RESERVATION_ID_MIN + 1


def format_reservation_id(number: int) -> str:
    return f"{RESERVATION_ID_PREFIX}{number}"


def is_valid_reservation_id(value: str) -> bool:
    return bool(RESERVATION_ID_REGEX.fullmatch(value or ""))


class ReservationIdGenerator:
    """Draws ``R1000``..``R9999`` uniformly, skipping ids already in use."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def generate(self, existing_ids: Collection[str]) -> str:
        taken = {i for i in existing_ids if is_valid_reservation_id(i)}
        if len(taken) >= ID_SPACE:
            raise ReservationIdsExhausted("every reservation id is already in use")
        while True:
            candidate = format_reservation_id(
                self.rng.randint(RESERVATION_ID_MIN, RESERVATION_ID_MAX)
            )
            if candidate not in taken:
                return candidate
