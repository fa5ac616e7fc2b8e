import logging
import random
import time
from decimal import Decimal

from booking_core.utils.constants import PAYMENT_APPROVAL_RATE, PAYMENT_DELAY_SECONDS

logger = logging.getLogger(__name__)


class PaymentService:
    """Simulated card authorization: slow, and declines now and then."""

    def __init__(
        self,
        approval_rate: float = PAYMENT_APPROVAL_RATE,
        delay_seconds: float = PAYMENT_DELAY_SECONDS,
        rng: random.Random | None = None,
        sleep=time.sleep,
    ):
        if not 0 <= approval_rate <= 1:
            raise ValueError("approval_rate must be between 0 and 1")
        self.approval_rate = approval_rate
        self.delay_seconds = delay_seconds
        self.rng = rng or random.Random()
        self.sleep = sleep

    def authorize(self, amount: Decimal) -> bool:
        if amount <= 0:
            raise ValueError("payment amount must be positive")
        logger.info(f"Processing payment of {amount:.2f}")
        if self.delay_seconds > 0:
            self.sleep(self.delay_seconds)
        approved = self.rng.random() < self.approval_rate
        logger.info("Payment approved" if approved else "Payment declined")
        return approved
