import os
from decimal import Decimal

from booking_core.models.rooms import Category

ROOMS_SNAPSHOT = "rooms"
RESERVATIONS_SNAPSHOT = "reservations"

SEED_ROOMS = (
    (101, Category.STANDARD, Decimal("40.00")),
    (102, Category.STANDARD, Decimal("45.00")),
    (201, Category.DELUXE, Decimal("80.00")),
    (202, Category.DELUXE, Decimal("85.00")),
    (301, Category.SUITE, Decimal("150.00")),
)

RESERVATION_ID_PREFIX = "R"
RESERVATION_ID_MIN = 1000
RESERVATION_ID_MAX = 9999

DATE_FORMAT = "YYYY-MM-DD"

STORAGE_BACKEND = os.environ.get("HOTEL_STORAGE_BACKEND", "file")
DATA_DIR = os.environ.get("HOTEL_DATA_DIR", ".")
TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

PAYMENT_APPROVAL_RATE = float(os.environ.get("PAYMENT_APPROVAL_RATE", "0.85"))
PAYMENT_DELAY_SECONDS = float(os.environ.get("PAYMENT_DELAY_SECONDS", "0.4"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
