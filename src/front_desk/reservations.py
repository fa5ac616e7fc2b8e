import logging
from pydantic import ValidationError

from booking_core.schemas.reservations import (
    BookingRequest,
    GuestLookup,
    ReservationLookup,
    SearchRequest,
)
from booking_core.services.booking_service import BookingService
from booking_core.models.reservations import ReservationStatus
from booking_core.utils.custom_exceptions import (
    InvalidCategory,
    InvalidDates,
    NotFoundException,
    ReservationAlreadyCancelled,
    ReservationIdsExhausted,
    RoomUnavailable,
)
from booking_core.utils.custom_response import APIResponse, send_custom_response

logger = logging.getLogger(__name__)


def _validation_message(err: ValidationError) -> str:
    return "; ".join(f"{e['msg']}".removeprefix("Value error, ") for e in err.errors())


def search_rooms(service: BookingService, event: dict) -> APIResponse:
    try:
        request = SearchRequest.model_validate(event)
        rooms = service.search_available_rooms(
            request.category, request.checkin, request.checkout
        )
        if not rooms:
            return send_custom_response(
                200, "No available rooms found for those dates.", []
            )
        return send_custom_response(200, "Available rooms", rooms)

    except ValidationError as err:
        return send_custom_response(400, _validation_message(err))
    except (InvalidDates, InvalidCategory) as err:
        return send_custom_response(400, str(err))
    except Exception as err:
        logger.exception(f"Unhandled error while searching rooms: {err}")
        return send_custom_response(500, "Internal server error")


def book_room(service: BookingService, event: dict) -> APIResponse:
    try:
        request = BookingRequest.model_validate(event)
    except ValidationError as err:
        return send_custom_response(400, _validation_message(err))

    try:
        reservation = service.make_reservation(
            request.room_id, request.guest_name, request.checkin, request.checkout
        )
        if reservation.status is ReservationStatus.CONFIRMED:
            message = f"Payment succeeded. Reservation confirmed: {reservation.reservation_id}"
        else:
            message = (
                "Payment failed. Reservation recorded as FAILED_PAYMENT with id: "
                f"{reservation.reservation_id}"
            )
        return send_custom_response(201, message, reservation)

    except InvalidDates as err:
        return send_custom_response(400, str(err))
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))
    except RoomUnavailable as err:
        return send_custom_response(409, str(err))
    except ReservationIdsExhausted as err:
        return send_custom_response(503, str(err))
    except Exception as err:
        logger.exception(f"Unhandled error while booking: {err}")
        return send_custom_response(500, "Internal server error")


def cancel_booking(service: BookingService, event: dict) -> APIResponse:
    try:
        request = ReservationLookup.model_validate(event)
        reservation = service.cancel_reservation(request.reservation_id)
        return send_custom_response(
            200, f"Reservation {reservation.reservation_id} cancelled.", reservation
        )

    except ValidationError as err:
        return send_custom_response(400, _validation_message(err))
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))
    except ReservationAlreadyCancelled:
        return send_custom_response(409, "Reservation already cancelled.")
    except Exception as err:
        logger.exception(f"Unhandled error while cancelling: {err}")
        return send_custom_response(500, "Internal server error")


def list_guest_bookings(service: BookingService, event: dict) -> APIResponse:
    try:
        request = GuestLookup.model_validate(event)
        reservations = service.get_reservations_for_guest(request.guest_name)
        if not reservations:
            return send_custom_response(
                200, f"No reservations found for {request.guest_name}", []
            )
        return send_custom_response(200, "Reservations", reservations)

    except ValidationError as err:
        return send_custom_response(400, _validation_message(err))
    except Exception as err:
        logger.exception(f"Unhandled error while listing guest bookings: {err}")
        return send_custom_response(500, "Internal server error")


def get_booking(service: BookingService, event: dict) -> APIResponse:
    try:
        request = ReservationLookup.model_validate(event)
        reservation = service.get_reservation_by_id(request.reservation_id)
        return send_custom_response(200, "successfully retrieved", reservation)

    except ValidationError as err:
        return send_custom_response(400, _validation_message(err))
    except NotFoundException:
        return send_custom_response(404, "Reservation not found.")
    except Exception as err:
        logger.exception(f"Unhandled error while retrieving booking: {err}")
        return send_custom_response(500, "Internal server error")


def list_rooms(service: BookingService, event: dict | None = None) -> APIResponse:
    return send_custom_response(200, "Rooms in system", service.list_rooms())

