import logging
from boto3 import resource

from booking_core.repository.reservation_store import ReservationStore
from booking_core.repository.snapshot_storage import (
    DynamoSnapshotStorage,
    FileSnapshotStorage,
)
from booking_core.services.booking_service import BookingService
from booking_core.services.payment_service import PaymentService
from booking_core.utils import constants

logger = logging.getLogger(__name__)


def build_storage(backend: str = constants.STORAGE_BACKEND):
    if backend == "file":
        return FileSnapshotStorage(constants.DATA_DIR)
    if backend == "dynamodb":
        if not constants.TABLE_NAME:
            raise ValueError("TABLE_NAME must be set for the dynamodb backend")
        dynamodb = resource("dynamodb", region_name=constants.AWS_REGION)
        return DynamoSnapshotStorage(dynamodb.Table(constants.TABLE_NAME))
    raise ValueError(f"Unknown storage backend: {backend}")


def build_booking_service(storage=None, payment_service=None) -> BookingService:
    store = ReservationStore(storage or build_storage())
    store.load()
    return BookingService(
        store=store,
        payment_service=payment_service or PaymentService(),
    )
