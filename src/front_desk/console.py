import logging
import sys

from booking_core.services.booking_service import BookingService
from booking_core.utils.constants import DATE_FORMAT, LOG_LEVEL
from booking_core.utils.custom_response import APIResponse
from front_desk import reservations
from front_desk.app import build_booking_service

MENU = """
Menu:
1) Search rooms & Book
2) Cancel reservation
3) View my bookings (by guest name)
4) View booking details (by reservation id)
5) List all rooms
0) Exit"""


class ConsoleUI:
    def __init__(self, service: BookingService, stdin=None, stdout=None):
        self.service = service
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _print(self, text: str = ""):
        print(text, file=self.stdout)

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _show(self, response: APIResponse):
        self._print(response.message)
        if response.ok and isinstance(response.data, list):
            for item in response.data:
                self._print(f" - {item}")
        elif response.ok and response.data is not None:
            self._print(f"Reservation result: {response.data}")

    def run(self):
        self._print("=== Hotel Reservation System ===")
        actions = {
            "1": self.search_and_book,
            "2": self.cancel,
            "3": self.bookings_by_guest,
            "4": self.booking_details,
            "5": self.all_rooms,
        }
        while True:
            self._print(MENU)
            try:
                choice = self._ask("Choose: ")
            except EOFError:
                choice = "0"
            if choice == "0":
                self.exit()
                return
            action = actions.get(choice)
            if action is None:
                self._print("Unknown option. Try again.")
                continue
            try:
                action()
            except EOFError:
                self.exit()
                return

    def search_and_book(self):
        category = self._ask("Enter category (Standard/Deluxe/Suite): ")
        checkin = self._ask(f"Check-in date ({DATE_FORMAT}): ")
        checkout = self._ask(f"Check-out date ({DATE_FORMAT}): ")
        found = reservations.search_rooms(
            self.service,
            {"category": category, "checkin": checkin, "checkout": checkout},
        )
        self._show(found)
        if not found.ok or not found.data:
            return

        room_id = self._ask("Enter room id to book: ")
        guest_name = self._ask("Your full name: ")
        booked = reservations.book_room(
            self.service,
            {
                "room_id": room_id,
                "guest_name": guest_name,
                "checkin": checkin,
                "checkout": checkout,
            },
        )
        self._show(booked)

    def cancel(self):
        reservation_id = self._ask("Enter reservation id to cancel (e.g. R1234): ")
        self._print(
            reservations.cancel_booking(
                self.service, {"reservation_id": reservation_id}
            ).message
        )

    def bookings_by_guest(self):
        guest_name = self._ask("Enter guest name: ")
        self._show(
            reservations.list_guest_bookings(self.service, {"guest_name": guest_name})
        )

    def booking_details(self):
        reservation_id = self._ask("Enter reservation id: ")
        response = reservations.get_booking(
            self.service, {"reservation_id": reservation_id}
        )
        self._print(str(response.data) if response.ok else response.message)

    def all_rooms(self):
        self._show(reservations.list_rooms(self.service))

    def exit(self):
        self._print("Saving data and exiting. Goodbye!")
        self.service.shutdown()


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ConsoleUI(build_booking_service()).run()


if __name__ == "__main__":
    main()
