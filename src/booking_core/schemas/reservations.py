import re
from datetime import date
from pydantic import BaseModel, Field, field_validator, model_validator

from booking_core.models.rooms import Category
from booking_core.utils.datetime_normaliser import from_iso_date

RESERVATION_ID_REGEX = re.compile(r"^R\d{4}$")


class StayRequest(BaseModel):
    checkin: date
    checkout: date

    @field_validator("checkin", "checkout", mode="before")
    @classmethod
    def parse_date(cls, v):
        return from_iso_date(v)

    @model_validator(mode="after")
    def validate_order(self):
        if self.checkout <= self.checkin:
            raise ValueError("checkout must be after checkin")
        return self


class SearchRequest(StayRequest):
    category: Category

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v):
        if isinstance(v, Category):
            return v
        try:
            return Category(str(v).strip().upper())
        except ValueError:
            allowed = ", ".join(c.value for c in Category)
            raise ValueError(f"Invalid category. Allowed: {allowed}") from None


class BookingRequest(StayRequest):
    room_id: int
    guest_name: str = Field(min_length=1, max_length=100)

    @field_validator("guest_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class ReservationLookup(BaseModel):
    reservation_id: str

    @field_validator("reservation_id", mode="before")
    @classmethod
    def validate_reservation_id(cls, v):
        v = str(v).strip()
        if not RESERVATION_ID_REGEX.fullmatch(v):
            raise ValueError("Reservation id must look like R1234")
        return v


class GuestLookup(BaseModel):
    guest_name: str = Field(min_length=1)

    @field_validator("guest_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v
