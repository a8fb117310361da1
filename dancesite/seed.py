"""
Sample data for local development and demos.

Each table is only seeded when it is empty, so running this more than once
is harmless.
"""

import logging

from sqlalchemy.orm import Session

from .models import Client, ClientType, ServiceOffering, ServiceType, Testimonial, utcnow

logger = logging.getLogger(__name__)

SAMPLE_CLIENTS = [
    {
        "name": "Demo Client",
        "email": "demo.client@example.com",
        "phone": "+46 70 123 45 67",
        "client_type": ClientType.STUDENT,
        "notes": "Seeded for local development",
    },
]

SAMPLE_SERVICE_OFFERINGS = [
    {
        "name": "Private class 60 min",
        "description": "One-on-one lesson focused on technique and body movement.",
        "service_type": ServiceType.PRIVATE_LESSON,
        "base_price_sek": 800.0,
        "duration_minutes": 60,
    },
    {
        "name": "Workshop",
        "description": "Group workshop for dance schools and clubs.",
        "service_type": ServiceType.WORKSHOP,
        "base_price_sek": 3500.0,
        "duration_minutes": 120,
    },
    {
        "name": "Weekend bootcamp",
        "description": "Intensive training over a weekend.",
        "service_type": ServiceType.BOOTCAMP,
        "base_price_sek": None,
        "duration_minutes": None,
    },
    {
        "name": "Event booking",
        "description": "Performance or social dance hosting at your event.",
        "service_type": ServiceType.EVENT_BOOKING,
        "base_price_sek": None,
        "duration_minutes": None,
    },
]

SAMPLE_TESTIMONIALS = [
    {
        "client_name": "Anna",
        "role": "Student",
        "text": "Clear explanations and a lot of energy. I improved fast.",
        "rating": 5,
    },
    {
        "client_name": "Malmö Dance Club",
        "role": "Organizer",
        "text": "The workshop was the highlight of our festival weekend.",
        "rating": 5,
    },
]


def seed_sample_data(db: Session) -> dict:
    """Insert the sample rows into empty tables.

    Returns:
        dict: Number of rows inserted per table
    """
    summary = {"clients": 0, "service_offerings": 0, "testimonials": 0}
    now = utcnow()

    if db.query(Client.id).first() is None:
        for data in SAMPLE_CLIENTS:
            db.add(Client(created_at_utc=now, **data))
            summary["clients"] += 1

    if db.query(ServiceOffering.id).first() is None:
        for data in SAMPLE_SERVICE_OFFERINGS:
            db.add(ServiceOffering(is_active=True, created_at_utc=now, **data))
            summary["service_offerings"] += 1

    if db.query(Testimonial.id).first() is None:
        for data in SAMPLE_TESTIMONIALS:
            db.add(Testimonial(is_approved=True, created_at_utc=now, **data))
            summary["testimonials"] += 1

    db.commit()
    logger.info(f"Seeded sample data: {summary}")
    return summary
