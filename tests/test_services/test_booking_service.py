import random
import unittest
from unittest.mock import MagicMock
from datetime import date
from decimal import Decimal
from botocore.exceptions import EndpointConnectionError

from booking_core.models.reservations import ReservationStatus
from booking_core.models.rooms import Category
from booking_core.repository.reservation_store import ReservationStore
from booking_core.repository.snapshot_storage import DynamoSnapshotStorage
from booking_core.services.booking_service import BookingService
from booking_core.services.reservation_ids import ReservationIdGenerator
from booking_core.utils.custom_exceptions import (
    InvalidCategory,
    InvalidDates,
    NotFoundException,
    PersistenceError,
    ReservationAlreadyCancelled,
    RoomUnavailable,
)

JAN_1 = date(2024, 1, 1)
JAN_3 = date(2024, 1, 3)


class TestBookingService(unittest.TestCase):

    def setUp(self):
        self.storage = MagicMock()
        self.storage.read.return_value = None
        self.store = ReservationStore(self.storage)
        self.store.load()
        self.storage.write.reset_mock()

        self.payment = MagicMock()
        self.payment.authorize.return_value = True

        self.service = BookingService(
            store=self.store,
            payment_service=self.payment,
            id_generator=ReservationIdGenerator(random.Random(7)),
        )

    def test_scenario_a_confirmed_booking(self):
        res = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        self.assertEqual(res.amount, Decimal("80.00"))
        self.assertEqual(res.status, ReservationStatus.CONFIRMED)
        self.assertEqual(res.nights, 2)
        self.assertRegex(res.reservation_id, r"^R\d{4}$")
        self.payment.authorize.assert_called_once_with(Decimal("80.00"))
        self.assertIn(res, self.store.reservations)
        self.storage.write.assert_called_once()
        self.assertEqual(self.storage.write.call_args[0][0], "reservations")

    def test_scenario_b_overlap_rejected(self):
        self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        with self.assertRaises(RoomUnavailable):
            self.service.make_reservation(101, "Bob", JAN_1, JAN_3)
        self.assertEqual(len(self.store.reservations), 1)

    def test_scenario_c_same_day_rejected(self):
        feb_1 = date(2024, 2, 1)

        with self.assertRaises(InvalidDates):
            self.service.make_reservation(101, "Alice", feb_1, feb_1)
        self.assertEqual(self.store.reservations, [])
        self.payment.authorize.assert_not_called()

    def test_checkout_before_checkin_rejected(self):
        with self.assertRaises(InvalidDates):
            self.service.make_reservation(101, "Alice", JAN_3, JAN_1)

    def test_scenario_d_rebook_after_cancel(self):
        alice = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)
        self.service.cancel_reservation(alice.reservation_id)

        bob = self.service.make_reservation(101, "Bob", JAN_1, JAN_3)

        self.assertEqual(bob.status, ReservationStatus.CONFIRMED)
        self.assertEqual(alice.status, ReservationStatus.CANCELLED)

    def test_scenario_e_declined_payment_keeps_room_free(self):
        self.payment.authorize.return_value = False

        failed = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        self.assertEqual(failed.status, ReservationStatus.FAILED_PAYMENT)
        self.assertIn(failed, self.store.reservations)
        rooms = self.service.search_available_rooms(Category.STANDARD, JAN_1, JAN_3)
        self.assertIn(101, [r.room_id for r in rooms])

        self.payment.authorize.return_value = True
        bob = self.service.make_reservation(101, "Bob", JAN_1, JAN_3)
        self.assertEqual(bob.status, ReservationStatus.CONFIRMED)

    def test_confirmed_booking_hidden_from_search(self):
        self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        rooms = self.service.search_available_rooms(
            Category.STANDARD, date(2024, 1, 2), date(2024, 1, 4)
        )

        self.assertEqual([r.room_id for r in rooms], [102])

    def test_unknown_room_not_found(self):
        with self.assertRaises(NotFoundException):
            self.service.make_reservation(999, "Alice", JAN_1, JAN_3)
        self.payment.authorize.assert_not_called()

    def test_save_failure_does_not_fail_booking(self):
        self.storage.write.side_effect = PersistenceError("disk full")

        res = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        self.assertEqual(res.status, ReservationStatus.CONFIRMED)
        self.assertIn(res, self.store.reservations)

    def test_unreachable_table_does_not_fail_booking(self):
        table = MagicMock()
        table.get_item.return_value = {}
        table.put_item.side_effect = EndpointConnectionError(
            endpoint_url="https://dynamodb.ap-south-1.amazonaws.com"
        )
        self.store.storage = DynamoSnapshotStorage(table)

        res = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        self.assertEqual(res.status, ReservationStatus.CONFIRMED)
        self.assertIn(res, self.store.reservations)
        table.put_item.assert_called_once()

    def test_reservation_ids_are_unique(self):
        ids = set()
        for month in range(1, 13):
            res = self.service.make_reservation(
                101, "Alice", date(2024, month, 1), date(2024, month, 2)
            )
            ids.add(res.reservation_id)

        self.assertEqual(len(ids), 12)

    def test_cancel_confirmed(self):
        res = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)
        self.storage.write.reset_mock()

        cancelled = self.service.cancel_reservation(res.reservation_id)

        self.assertIs(cancelled, res)
        self.assertEqual(res.status, ReservationStatus.CANCELLED)
        self.storage.write.assert_called_once()

    def test_cancel_twice_is_noop(self):
        res = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)
        self.service.cancel_reservation(res.reservation_id)
        self.storage.write.reset_mock()

        with self.assertRaises(ReservationAlreadyCancelled):
            self.service.cancel_reservation(res.reservation_id)
        self.assertEqual(res.status, ReservationStatus.CANCELLED)
        self.storage.write.assert_not_called()

    def test_cancel_failed_payment_allowed(self):
        self.payment.authorize.return_value = False
        res = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        self.service.cancel_reservation(res.reservation_id)

        self.assertEqual(res.status, ReservationStatus.CANCELLED)

    def test_cancel_unknown(self):
        with self.assertRaises(NotFoundException):
            self.service.cancel_reservation("R0000")

    def test_guest_lookup_is_case_insensitive(self):
        self.service.make_reservation(101, "Alice", JAN_1, JAN_3)
        self.payment.authorize.return_value = False
        self.service.make_reservation(201, "alice", JAN_1, JAN_3)
        self.service.make_reservation(102, "Bob", JAN_1, JAN_3)

        found = self.service.get_reservations_for_guest("ALICE")

        self.assertEqual([r.room_id for r in found], [101, 201])

    def test_get_by_id(self):
        res = self.service.make_reservation(101, "Alice", JAN_1, JAN_3)

        self.assertIs(self.service.get_reservation_by_id(res.reservation_id), res)
        with self.assertRaises(NotFoundException):
            self.service.get_reservation_by_id("R0001")

    def test_search_rejects_bad_dates(self):
        with self.assertRaises(InvalidDates):
            self.service.search_available_rooms(Category.SUITE, JAN_3, JAN_3)

    def test_search_accepts_category_name(self):
        rooms = self.service.search_available_rooms("deluxe", JAN_1, JAN_3)

        self.assertEqual([r.room_id for r in rooms], [201, 202])

    def test_search_rejects_unknown_category(self):
        with self.assertRaises(InvalidCategory):
            self.service.search_available_rooms("penthouse", JAN_1, JAN_3)

    def test_list_rooms(self):
        self.assertEqual(
            [r.room_id for r in self.service.list_rooms()], [101, 102, 201, 202, 301]
        )

    def test_shutdown_saves_everything(self):
        self.assertTrue(self.service.shutdown())
        names = [c[0][0] for c in self.storage.write.call_args_list]
        self.assertEqual(names, ["rooms", "reservations"])


if __name__ == "__main__":
    unittest.main()
