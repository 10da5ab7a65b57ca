#!/usr/bin/env python3
"""Seed demo data for screenshots.

Creates a demo wishlist owner and a gift buyer, a few wishlists of each
privacy level, items with price history, and a claim in progress.

Usage:
    DATABASE_URL=sqlite:///./wishlist.db python scripts/seed_demo_data.py
"""

import os
import sys
from datetime import UTC, datetime, timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import sessionmaker

from src.config import get_settings
from src.database import Base, build_engine
from src.models import User
from src.models.enums import Privacy, RelationshipType
from src.services.auth import get_password_hash
from src.services.claim_service import ClaimService, PurchaseDetails
from src.services.friendship_service import FriendshipService
from src.services.item_service import ItemService
from src.services.pricing import append_price_history
from src.services.wishlist_service import WishlistService

DEMO_PASSWORD = "demopass123"

DEMO_USERS = [
    ("demo@example.com", "demo", "Demo User"),
    ("buyer@example.com", "buyer", "Gift Buyer"),
]


def create_user(session, email, username, name):
    existing = session.query(User).filter_by(email=email).first()
    if existing:
        print(f"Removing previous demo user {email}...")
        session.delete(existing)
        session.commit()

    user = User(
        email=email,
        password_hash=get_password_hash(DEMO_PASSWORD),
        name=name,
        username=username,
    )
    session.add(user)
    session.commit()
    return user


def seed_demo_data():
    """Seed the database with representative wishlist data."""
    engine = build_engine(get_settings().database_url)
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        print("Creating demo users...")
        owner, buyer = (create_user(session, *fields) for fields in DEMO_USERS)

        wishlists = WishlistService(session)
        items = ItemService(session)
        claims = ClaimService(session)

        print("Creating wishlists...")
        birthday = wishlists.create_wishlist(
            owner.id, name="Birthday", description="Turning 30 in March", is_default=True
        )
        wishlists.create_wishlist(owner.id, name="Home Office", privacy=Privacy.PRIVATE)
        wishlists.create_wishlist(owner.id, name="Someday", privacy=Privacy.PERSONAL)

        print("Adding items...")
        headphones = items.add_item(
            birthday.id,
            owner.id,
            {
                "title": "Noise Cancelling Headphones",
                "url": "https://example.com/headphones",
                "price": "$349.99",
                "priority": 1,
                "category": "Electronics",
            },
        )
        # Backdated history so the price chart has something to show
        now = datetime.now(UTC)
        history = None
        for days_ago, price in [(60, "$399.99"), (30, "$379.99"), (0, "$349.99")]:
            history = append_price_history(history, price, now - timedelta(days=days_ago))
        headphones.price_history = history
        session.commit()

        items.add_item(
            birthday.id,
            owner.id,
            {
                "title": "Merino Wool Sweater",
                "url": "https://example.com/sweater",
                "price": "£85",
                "item_type": "clothing",
                "size": "M",
                "tags": ["winter", "wool"],
            },
        )
        book = items.add_item(
            birthday.id,
            owner.id,
            {"title": "Cookbook", "url": "https://example.com/cookbook", "price": "$32"},
        )

        print("Connecting buyer as a moderator...")
        friendships = FriendshipService(session)
        request = friendships.send_request(buyer.id, owner.id, RelationshipType.MODERATOR)
        friendships.accept_request(request.id, owner.id)

        print("Claiming and purchasing an item...")
        claims.claim(book.id, buyer.id)
        claims.mark_as_purchased(
            book.id,
            buyer.id,
            PurchaseDetails(purchase_date=now, tracking_number="1Z999AA10123456784"),
        )

        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
