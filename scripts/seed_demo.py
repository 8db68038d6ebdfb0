#!/usr/bin/env python3
"""
Seed script to create a demo restaurant and call history
"""

import asyncio
import uuid
from datetime import datetime, timedelta


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from mybot_api.database import SessionLocal, engine, Base
    from mybot_api.models import Restaurant, Call

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        # Check if demo restaurant already exists
        result = await db.execute(
            select(Restaurant).where(Restaurant.name == "Mario's Italian Kitchen")
        )
        existing = result.scalar_one_or_none()

        if existing:
            print("Demo data already exists. Skipping...")
            return

        print("Creating demo restaurant...")

        restaurant = Restaurant(
            id=uuid.uuid4(),
            name="Mario's Italian Kitchen",
            timezone="America/New_York",
            language_default="en-US",
            public_phone="+15551234567",
            provider="twilio",
            provider_config={"voice": "alice", "record": True},
        )
        db.add(restaurant)
        await db.flush()

        print(f"Created restaurant: {restaurant.name} (ID: {restaurant.id})")

        now = datetime.utcnow()
        calls = [
            # Finished call that booked a table
            Call(
                restaurant_id=restaurant.id,
                started_at=now - timedelta(hours=3),
                ended_at=now - timedelta(hours=3) + timedelta(seconds=184),
                from_phone_e164="+15559876543",
                to_phone_e164=restaurant.public_phone,
                language_detected="en",
                flow="reservation",
                outcome="reservation_made",
                reservation_id=uuid.uuid4(),
                metadata_json={"party_size": 4},
            ),
            # Finished call, opening hours question
            Call(
                restaurant_id=restaurant.id,
                started_at=now - timedelta(hours=2),
                ended_at=now - timedelta(hours=2) + timedelta(seconds=52),
                from_phone_e164="+15551112222",
                to_phone_e164=restaurant.public_phone,
                language_detected="es",
                flow="faq",
                outcome="faq_answered",
            ),
            # Still on the line
            Call(
                restaurant_id=restaurant.id,
                started_at=now - timedelta(minutes=1),
                from_phone_e164="+15553334444",
                to_phone_e164=restaurant.public_phone,
                language_detected="en",
                flow="greeting",
            ),
        ]

        for call in calls:
            db.add(call)

        await db.commit()

        print(f"Created {len(calls)} demo calls")
        print("\nDemo data seeded successfully!")
        print(f"Restaurant ID: {restaurant.id}")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
