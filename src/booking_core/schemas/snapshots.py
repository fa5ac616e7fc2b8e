from typing import List
from pydantic import TypeAdapter

from booking_core.models.rooms import Room
from booking_core.models.reservations import Reservation

rooms_adapter = TypeAdapter(List[Room])
reservations_adapter = TypeAdapter(List[Reservation])


def dump_rooms(rooms: List[Room]) -> str:
    return rooms_adapter.dump_json(rooms, indent=2).decode("utf-8")


def load_rooms(payload: str) -> List[Room]:
    return rooms_adapter.validate_json(payload)


def dump_reservations(reservations: List[Reservation]) -> str:
    return reservations_adapter.dump_json(reservations, indent=2).decode("utf-8")


def load_reservations(payload: str) -> List[Reservation]:
    return reservations_adapter.validate_json(payload)
