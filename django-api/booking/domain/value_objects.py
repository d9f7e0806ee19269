"""Domain primitives that enforce validity at creation time."""

import math
from dataclasses import dataclass, replace
from typing import Self
from uuid import UUID, uuid4

from booking.domain.errors import InvalidIdFormatError


@dataclass(frozen=True)
class Identity:
    """UUID-backed identifier. Equal only to ids of the same type and value."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise InvalidIdFormatError(type(self).__name__, self.value)

    @classmethod
    def create_unique(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def create(cls, value: str | UUID) -> Self:
        """Parse any spelling uuid.UUID accepts (upper case, braces, urn: prefix).

        The id keeps the parsed value, so ``str()`` always gives the canonical
        lower-case hyphenated form rather than the raw input.
        """
        if isinstance(value, UUID):
            return cls(value=value)
        try:
            return cls(value=UUID(value))
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidIdFormatError(cls.__name__, value) from exc

    @classmethod
    def convert_from(cls, value: str | UUID) -> Self:
        return cls.create(value)

    def __str__(self) -> str:
        return str(self.value)


class UserId(Identity):
    """Unique identifier for a User."""


class HostId(Identity):
    """Unique identifier for a Host."""


class GuestId(Identity):
    """Unique identifier for a Guest."""


class BillId(Identity):
    """Unique identifier for a Bill."""


class MenuId(Identity):
    """Unique identifier for a Menu."""


class MenuSectionId(Identity):
    """Unique identifier for a MenuSection, scoped to its Menu."""


class MenuItemId(Identity):
    """Unique identifier for a MenuItem, scoped to its MenuSection."""


class MenuReviewId(Identity):
    """Unique identifier for a MenuReview."""


class DinnerId(Identity):
    """Unique identifier for a Dinner."""


class ReservationId(Identity):
    """Unique identifier for a Reservation, scoped to its Dinner."""


@dataclass(frozen=True)
class AverageRating:
    """Running mean of ratings.

    A rating with no samples is "unrated", not zero: ``reported`` is None
    until the first rating arrives.
    """

    value: float = 0.0
    num_ratings: int = 0

    def __post_init__(self) -> None:
        if self.num_ratings < 0:
            raise ValueError("Rating count cannot be negative")

    @classmethod
    def create_new(cls) -> Self:
        return cls()

    def with_rating(self, score: float) -> Self:
        if score < 0 or not math.isfinite(score):
            raise ValueError("Rating score must be a non-negative number")
        count = self.num_ratings + 1
        return replace(
            self,
            value=(self.value * self.num_ratings + score) / count,
            num_ratings=count,
        )

    @property
    def is_rated(self) -> bool:
        return self.num_ratings > 0

    @property
    def reported(self) -> float | None:
        return self.value if self.is_rated else None


@dataclass(frozen=True)
class Location:
    """Where a dinner takes place."""

    name: str
    address: str
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180 <= self.longitude <= 180:
            raise ValueError("Longitude must be between -180 and 180")

    @classmethod
    def create(cls, name: str, address: str, latitude: float, longitude: float) -> Self:
        return cls(name=name, address=address, latitude=latitude, longitude=longitude)
