import logging
from typing import List, Optional

from booking_core.models.rooms import Room
from booking_core.models.reservations import Reservation
from booking_core.schemas import snapshots
from booking_core.utils.constants import (
    ROOMS_SNAPSHOT,
    RESERVATIONS_SNAPSHOT,
    SEED_ROOMS,
)
from booking_core.utils.custom_exceptions import PersistenceError


logger = logging.getLogger(__name__)


class ReservationStore:
    """In-memory rooms and reservations backed by a snapshot storage.

    Every save rewrites the whole collection. Save failures are logged and
    reported through the return value; the in-memory state is kept either way.
    """

    def __init__(self, storage):
        self.storage = storage
        self.rooms: List[Room] = []
        self.reservations: List[Reservation] = []

    def load(self):
        try:
            self.rooms = self._read_rooms()
            logger.info(f"Loaded {len(self.rooms)} rooms")
        # pydantic ValidationError is a ValueError
        except (PersistenceError, ValueError) as err:
            logger.warning(f"Rooms could not be loaded ({err}), creating sample rooms")
            self.rooms = self.seed_rooms()
            self.save_rooms()

        try:
            self.reservations = self._read_reservations()
            logger.info(f"Loaded {len(self.reservations)} reservations")
        except (PersistenceError, ValueError) as err:
            logger.warning(f"No existing reservations loaded ({err})")
            self.reservations = []
            self.save_reservations()

    def _read_rooms(self) -> List[Room]:
        payload = self.storage.read(ROOMS_SNAPSHOT)
        if payload is None:
            raise PersistenceError("rooms snapshot not found")
        rooms = snapshots.load_rooms(payload)
        if not rooms:
            raise PersistenceError("rooms snapshot is empty")
        return rooms

    def _read_reservations(self) -> List[Reservation]:
        payload = self.storage.read(RESERVATIONS_SNAPSHOT)
        if payload is None:
            raise PersistenceError("reservations snapshot not found")
        return snapshots.load_reservations(payload)

    @staticmethod
    def seed_rooms() -> List[Room]:
        return [
            Room(room_id=room_id, category=category, price_per_night=price)
            for room_id, category, price in SEED_ROOMS
        ]

    def save_rooms(self) -> bool:
        try:
            self.storage.write(ROOMS_SNAPSHOT, snapshots.dump_rooms(self.rooms))
        except PersistenceError as err:
            logger.error(f"Failed to save rooms: {err}")
            return False
        return True

    def save_reservations(self) -> bool:
        try:
            self.storage.write(
                RESERVATIONS_SNAPSHOT, snapshots.dump_reservations(self.reservations)
            )
        except PersistenceError as err:
            logger.error(f"Failed to save reservations: {err}")
            return False
        return True

    def save_all(self) -> bool:
        rooms_saved = self.save_rooms()
        reservations_saved = self.save_reservations()
        return rooms_saved and reservations_saved

    def get_room(self, room_id: int) -> Optional[Room]:
        for room in self.rooms:
            if room.room_id == room_id:
                return room
        return None

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        for reservation in self.reservations:
            if reservation.reservation_id == reservation_id:
                return reservation
        return None

    def reservation_ids(self) -> set[str]:
        return {r.reservation_id for r in self.reservations}

    def add_reservation(self, reservation: Reservation):
        self.reservations.append(reservation)
