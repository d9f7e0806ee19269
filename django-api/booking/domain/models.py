"""Aggregates and entities.

These are pure domain objects with no API input rules.
Django ORM models are in booking/models.py (persistence layer).

Entities compare by id. Owned children are exposed as tuples; other
aggregates are referenced by id only.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Self, TypeVar

from booking.domain.errors import InvariantViolationError
from booking.domain.value_objects import (
    AverageRating,
    BillId,
    DinnerId,
    GuestId,
    HostId,
    Identity,
    Location,
    MenuId,
    MenuItemId,
    MenuReviewId,
    MenuSectionId,
    ReservationId,
    UserId,
)

TId = TypeVar("TId", bound=Identity)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=False)
class Entity(Generic[TId]):
    """Base for objects with a stable identity."""

    id: TId

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.id == self.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))


@dataclass(frozen=True, eq=False)
class AggregateRoot(Entity[TId]):
    """Consistency boundary; the only entry point for its owned entities."""


class DinnerStatus(Enum):
    SCHEDULED = "Scheduled"
    STARTED = "Started"
    ENDED = "Ended"
    CANCELLED = "Cancelled"


class ReservationStatus(Enum):
    PENDING_GUEST_CONFIRMATION = "PendingGuestConfirmation"
    RESERVED = "Reserved"
    CANCELLED = "Cancelled"


@dataclass(frozen=True, eq=False)
class User(AggregateRoot[UserId]):
    first_name: str
    last_name: str
    email: str
    password: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        now: datetime | None = None,
    ) -> Self:
        """Create a user. ``password`` must already be hashed."""
        now = now or utcnow()
        return cls(
            id=UserId.create_unique(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True, eq=False)
class MenuItem(Entity[MenuItemId]):
    name: str
    description: str

    @classmethod
    def create(cls, name: str, description: str) -> Self:
        return cls(id=MenuItemId.create_unique(), name=name, description=description)


@dataclass(frozen=True, eq=False)
class MenuSection(Entity[MenuSectionId]):
    name: str
    description: str
    items: tuple[MenuItem, ...] = ()

    @classmethod
    def create(cls, name: str, description: str, items: Iterable[MenuItem] = ()) -> Self:
        return cls(
            id=MenuSectionId.create_unique(),
            name=name,
            description=description,
            items=tuple(items),
        )


@dataclass(frozen=True, eq=False)
class Menu(AggregateRoot[MenuId]):
    name: str
    description: str
    host_id: HostId
    average_rating: AverageRating
    sections: tuple[MenuSection, ...]
    created_at: datetime
    updated_at: datetime
    dinner_ids: tuple[DinnerId, ...] = ()
    menu_review_ids: tuple[MenuReviewId, ...] = ()

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        host_id: HostId,
        sections: Iterable[MenuSection],
        now: datetime | None = None,
    ) -> Self:
        """Create a menu with a fresh id, no ratings and no back-references.

        Raises:
            InvariantViolationError: If a section has no items.
        """
        sections = tuple(sections)
        for section in sections:
            if not section.items:
                raise InvariantViolationError(
                    f"Menu section {section.name!r} must contain at least one item"
                )
        now = now or utcnow()
        return cls(
            id=MenuId.create_unique(),
            name=name,
            description=description,
            host_id=host_id,
            average_rating=AverageRating.create_new(),
            sections=sections,
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True, eq=False)
class Reservation(Entity[ReservationId]):
    guest_count: int
    status: ReservationStatus
    guest_id: GuestId
    bill_id: BillId
    created_at: datetime
    updated_at: datetime
    arrival_time: datetime | None = None

    def __post_init__(self) -> None:
        if self.guest_count < 1:
            raise InvariantViolationError("A reservation needs at least one guest")

    @classmethod
    def create(
        cls,
        guest_count: int,
        guest_id: GuestId,
        bill_id: BillId,
        now: datetime | None = None,
    ) -> Self:
        now = now or utcnow()
        return cls(
            id=ReservationId.create_unique(),
            guest_count=guest_count,
            status=ReservationStatus.PENDING_GUEST_CONFIRMATION,
            guest_id=guest_id,
            bill_id=bill_id,
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True, eq=False)
class Dinner(AggregateRoot[DinnerId]):
    name: str
    description: str
    start_at: datetime
    end_at: datetime
    status: DinnerStatus
    is_public: bool
    host_id: HostId
    menu_id: MenuId
    image_url: str
    location: Location
    created_at: datetime
    updated_at: datetime
    started_at: datetime | None = None
    ended_at: datetime | None = None
    reservations: tuple[Reservation, ...] = field(default=())

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        start_at: datetime,
        end_at: datetime,
        is_public: bool,
        host_id: HostId,
        menu_id: MenuId,
        image_url: str,
        location: Location,
        now: datetime | None = None,
    ) -> Self:
        if end_at <= start_at:
            raise InvariantViolationError("A dinner must end after it starts")
        now = now or utcnow()
        return cls(
            id=DinnerId.create_unique(),
            name=name,
            description=description,
            start_at=start_at,
            end_at=end_at,
            status=DinnerStatus.SCHEDULED,
            is_public=is_public,
            host_id=host_id,
            menu_id=menu_id,
            image_url=image_url,
            location=location,
            created_at=now,
            updated_at=now,
        )

    def add_reservation(self, reservation: Reservation, now: datetime | None = None) -> Self:
        """Return a copy of this dinner that owns ``reservation``."""
        if reservation in self.reservations:
            raise InvariantViolationError("Reservation is already part of this dinner")
        return replace(
            self,
            reservations=(*self.reservations, reservation),
            updated_at=now or utcnow(),
        )
