from datetime import date
from typing import List

from booking_core.models.rooms import Category, Room
from booking_core.repository.reservation_store import ReservationStore


class AvailabilityService:
    def __init__(self, store: ReservationStore):
        self.store = store

    def is_available(self, room_id: int, checkin: date, checkout: date) -> bool:
        for reservation in self.store.reservations:
            if reservation.room_id != room_id:
                continue
            if not reservation.occupies_room:
                continue
            if reservation.overlaps(checkin, checkout):
                return False
        return True

    def search_available(
        self, category: Category, checkin: date, checkout: date
    ) -> List[Room]:
        return [
            room
            for room in self.store.rooms
            if room.category == category
            and self.is_available(room.room_id, checkin, checkout)
        ]
