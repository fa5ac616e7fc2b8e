import logging
import threading
from datetime import date
from typing import List

from booking_core.models.rooms import Category, Room
from booking_core.models.reservations import Reservation, ReservationStatus
from booking_core.repository.reservation_store import ReservationStore
from booking_core.services.availability_service import AvailabilityService
from booking_core.services.payment_service import PaymentService
from booking_core.services.reservation_ids import ReservationIdGenerator
from booking_core.utils.custom_exceptions import (
    InvalidCategory,
    InvalidDates,
    NotFoundException,
    ReservationAlreadyCancelled,
    RoomUnavailable,
)

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(
        self,
        store: ReservationStore,
        payment_service: PaymentService,
        availability: AvailabilityService | None = None,
        id_generator: ReservationIdGenerator | None = None,
    ):
        self.store = store
        self.payment_service = payment_service
        self.availability = availability or AvailabilityService(store)
        self.id_generator = id_generator or ReservationIdGenerator()
        # availability check through append must not interleave
        self._lock = threading.RLock()

    @staticmethod
    def _validate_dates(checkin: date, checkout: date):
        if not checkin < checkout:
            raise InvalidDates("check-in must be before check-out")

    @staticmethod
    def _to_category(category) -> Category:
        if isinstance(category, Category):
            return category
        try:
            return Category(str(category).strip().upper())
        except ValueError:
            raise InvalidCategory(f"unknown category: {category}") from None

    def list_rooms(self) -> List[Room]:
        return list(self.store.rooms)

    def search_available_rooms(
        self, category: Category, checkin: date, checkout: date
    ) -> List[Room]:
        category = self._to_category(category)
        self._validate_dates(checkin, checkout)
        return self.availability.search_available(category, checkin, checkout)

    def make_reservation(
        self, room_id: int, guest_name: str, checkin: date, checkout: date
    ) -> Reservation:
        self._validate_dates(checkin, checkout)
        with self._lock:
            if not self.availability.is_available(room_id, checkin, checkout):
                raise RoomUnavailable(
                    f"room {room_id} is not available from {checkin} to {checkout}"
                )
            room = self.store.get_room(room_id)
            if room is None:
                raise NotFoundException("room", room_id)

            nights = (checkout - checkin).days
            amount = nights * room.price_per_night

            # free rooms have nothing to authorize
            approved = amount == 0 or self.payment_service.authorize(amount)

            reservation = Reservation(
                reservation_id=self.id_generator.generate(self.store.reservation_ids()),
                room_id=room_id,
                guest_name=guest_name,
                checkin=checkin,
                checkout=checkout,
                amount=amount,
                status=(
                    ReservationStatus.CONFIRMED
                    if approved
                    else ReservationStatus.FAILED_PAYMENT
                ),
            )
            self.store.add_reservation(reservation)
            self.store.save_reservations()

        if approved:
            logger.info(f"Reservation confirmed: {reservation.reservation_id}")
        else:
            logger.info(
                f"Payment failed, reservation recorded as FAILED_PAYMENT: "
                f"{reservation.reservation_id}"
            )
        return reservation

    def cancel_reservation(self, reservation_id: str) -> Reservation:
        with self._lock:
            reservation = self.store.get_reservation(reservation_id)
            if reservation is None:
                raise NotFoundException("reservation", reservation_id)
            if reservation.status is ReservationStatus.CANCELLED:
                raise ReservationAlreadyCancelled(
                    f"reservation {reservation_id} is already cancelled"
                )
            # FAILED_PAYMENT records may be cancelled too
            reservation.status = ReservationStatus.CANCELLED
            self.store.save_reservations()

        logger.info(f"Reservation {reservation_id} cancelled")
        return reservation

    def get_reservations_for_guest(self, guest_name: str) -> List[Reservation]:
        wanted = guest_name.casefold()
        return [
            r for r in self.store.reservations if r.guest_name.casefold() == wanted
        ]

    def get_reservation_by_id(self, reservation_id: str) -> Reservation:
        reservation = self.store.get_reservation(reservation_id)
        if reservation is None:
            raise NotFoundException("reservation", reservation_id)
        return reservation

    def shutdown(self) -> bool:
        return self.store.save_all()
