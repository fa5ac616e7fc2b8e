class NotFoundException(Exception):
    def __init__(self, resource: str, identifier, status_code: int = 404):
        self.resource = resource
        self.identifier = identifier
        self.status_code = status_code

    def __str__(self):
        return f"{self.resource} '{self.identifier}' not found"


class InvalidDates(Exception):
    pass


class InvalidCategory(Exception):
    pass


class RoomUnavailable(Exception):
    pass


class ReservationAlreadyCancelled(Exception):
    pass


class ReservationIdsExhausted(Exception):
    pass


class PersistenceError(Exception):
    pass
