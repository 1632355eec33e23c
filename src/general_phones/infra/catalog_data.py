"""Compiled-in catalog shown on the homepage.

Image paths are resolved by whatever serves static assets; nothing here
checks that they exist.
"""

from __future__ import annotations

from decimal import Decimal

from general_phones.domain.phone import Phone

HERO_IMAGE = "/images/hero-phones.jpg"

PHONES: tuple[Phone, ...] = (
    Phone(
        id=1,
        name="Pulse X1",
        brand="NovaTech",
        price=Decimal("249"),
        rating=Decimal("4.5"),
        image="/images/phone-1.jpg",
        tag="Best seller",
    ),
    Phone(
        id=2,
        name="Arc Pro",
        brand="ZenMobile",
        price=Decimal("399"),
        rating=Decimal("4.7"),
        image="/images/phone-2.jpg",
        tag="New",
    ),
    Phone(
        id=3,
        name="MiniGo",
        brand="Pocket",
        price=Decimal("129"),
        rating=Decimal("4.0"),
        image="/images/phone-3.jpg",
        tag="Budget",
    ),
    Phone(
        id=4,
        name="Titan V",
        brand="MegaTel",
        price=Decimal("799"),
        rating=Decimal("4.8"),
        image="/images/phone-4.jpg",
        tag="Premium",
    ),
)
