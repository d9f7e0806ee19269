from booking.domain.errors import (
    AuthenticationErrors,
    DomainError,
    ErrorKind,
    InvalidIdFormatError,
    InvariantViolationError,
    MenuErrors,
    UserErrors,
)
from booking.domain.models import (
    Dinner,
    DinnerStatus,
    Menu,
    MenuItem,
    MenuSection,
    Reservation,
    ReservationStatus,
    User,
)
from booking.domain.result import Result
from booking.domain.value_objects import (
    AverageRating,
    BillId,
    DinnerId,
    GuestId,
    HostId,
    Location,
    MenuId,
    MenuItemId,
    MenuReviewId,
    MenuSectionId,
    ReservationId,
    UserId,
)

__all__ = [
    "Dinner",
    "DinnerStatus",
    "Menu",
    "MenuItem",
    "MenuSection",
    "Reservation",
    "ReservationStatus",
    "User",
    "AverageRating",
    "Location",
    "BillId",
    "DinnerId",
    "GuestId",
    "HostId",
    "MenuId",
    "MenuItemId",
    "MenuReviewId",
    "MenuSectionId",
    "ReservationId",
    "UserId",
    "DomainError",
    "ErrorKind",
    "AuthenticationErrors",
    "MenuErrors",
    "UserErrors",
    "InvalidIdFormatError",
    "InvariantViolationError",
    "Result",
]
