import enum
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship

from .database import Base


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the way it is stored"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class LabeledEnum(str, enum.Enum):
    """String enum whose value is the public name used in JSON and the database.

    Older frontend builds send the numeric code instead of the name, so
    ``parse`` accepts either. Codes are positional, starting at ``first_code``.
    """

    @classmethod
    def first_code(cls) -> int:
        return 1

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            index = value - cls.first_code()
            if 0 <= index < len(members):
                return members[index]
        elif isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls.parse(int(text))
            for member in cls:
                if member.value.lower() == text.lower():
                    return member
        expected = ", ".join(member.value for member in cls)
        raise ValueError(f"'{value}' is not a valid {cls.__name__}. Expected one of: {expected}")

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)


class BookingStatus(LabeledEnum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"

    @classmethod
    def first_code(cls) -> int:
        return 0


class ServiceType(LabeledEnum):
    PRIVATE_LESSON = "PrivateLesson"
    EVENT_BOOKING = "EventBooking"
    WORKSHOP = "Workshop"
    BOOTCAMP = "Bootcamp"
    OTHER = "Other"


class ClientType(LabeledEnum):
    ORGANIZER = "Organizer"
    STUDENT = "Student"
    OTHER = "Other"


class LocationType(LabeledEnum):
    ON_SITE = "OnSite"  # At the instructor's studio or the client's home
    AT_VENUE = "AtVenue"  # At the organizer's club or event
    ONLINE = "Online"


def _enum_column(enum_cls, **kwargs) -> Column:
    # Persist the public value ("Pending"), not the Python member name
    return Column(
        SAEnum(
            enum_cls,
            values_callable=lambda members: [m.value for m in members],
            native_enum=False,
            length=20,
            validate_strings=True,
        ),
        **kwargs,
    )


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    client_type = _enum_column(ClientType, nullable=False, default=ClientType.OTHER)
    notes = Column(Text, nullable=True)
    created_at_utc = Column(DateTime, nullable=False, default=utcnow)

    bookings = relationship(
        "Booking",
        back_populates="client",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ServiceOffering(Base):
    __tablename__ = "service_offerings"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    service_type = _enum_column(ServiceType, nullable=False)
    base_price_sek = Column(Float, nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at_utc = Column(DateTime, nullable=False, default=utcnow)

    bookings = relationship(
        "Booking",
        back_populates="service_offering",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(
        Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_offering_id = Column(
        Integer,
        ForeignKey("service_offerings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    preferred_date_time = Column(DateTime, nullable=False, index=True)  # UTC
    location_type = _enum_column(LocationType, nullable=False, default=LocationType.ON_SITE)
    location_details = Column(String(200), nullable=True)  # Studio name, address, event hall
    message = Column(String(500), nullable=True)
    status = _enum_column(BookingStatus, nullable=False, default=BookingStatus.PENDING, index=True)
    created_at_utc = Column(DateTime, nullable=False, default=utcnow)

    client = relationship("Client", back_populates="bookings")
    service_offering = relationship("ServiceOffering", back_populates="bookings")


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, index=True)
    client_name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=True)  # e.g. "Student", "Organizer"
    text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5
    is_approved = Column(Boolean, nullable=False, default=False)
    created_at_utc = Column(DateTime, nullable=False, default=utcnow)
