"""
services.seed_service - Placeholder catalog and admin account.

Used on first start (empty database) and in debug mode so the UI has
something to list and compare.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

import config
from db.models import Part
from schema.categories import BaseProperties, CPUProperties, PartProperties
from services.auth_service import ensure_user
from services.parts_service import PartsService

logger = logging.getLogger(__name__)

INTEL_I5_BADGE = (
    "https://www.intel.com/content/dam/www/central-libraries/xa/en/images/"
    "intel-core-i5-badge-1440x1080.png.rendition.intel.web.64.64.png"
)

PLACEHOLDER_NAMES = (
    "Monitor", "GPU", "CPU", "Power Supply", "RAM", "SSD", "HDD", "Motherboard",
)


def seed_parts() -> list[PartProperties]:
    parts = [PartProperties(base=BaseProperties(name=n)) for n in PLACEHOLDER_NAMES]
    parts.append(PartProperties(
        base=BaseProperties(
            name="Intel Core i5-13500",
            image_url=INTEL_I5_BADGE,
            model="i5-13500",
            manufacturer="Intel",
            release_date="22Q4",
            rating=3.5,
        ),
        category=CPUProperties(
            cores=14,
            threads=20,
            max_frequency="4.80 GHz",
            base_frequency="1.80 GHz",
            max_tdp="154 W",
            base_tdp="65 W",
            cache="24 MB",
            max_ram_size="128 GB",
            max_memory_channels=2,
            ecc_memory_supported=True,
            max_pcie_lanes=20,
            max_supported_pcie_version="5.0",
            socket="FCLGA1700",
            max_temperature="100 C",
        ),
    ))
    parts.append(PartProperties(
        base=BaseProperties(
            name="Intel Core i5-12500",
            image_url=INTEL_I5_BADGE,
            model="i5-12500",
            manufacturer="Intel",
            release_date="21Q4",
            rating=2.5,
        ),
        category=CPUProperties(
            cores=6,
            threads=12,
            max_frequency="3.80 GHz",
            base_frequency="1.80 GHz",
            max_tdp="54 W",
            base_tdp="54 W",
            cache="12 MB",
            max_ram_size="128 GB",
            max_memory_channels=2,
            ecc_memory_supported=True,
            max_pcie_lanes=20,
            max_supported_pcie_version="4.0",
            socket="FCLGA1700",
            max_temperature="100 C",
        ),
    ))
    return parts


def seed_if_empty(session: Session) -> int:
    """
    Insert the seed catalog when there are no parts
    and make sure the admin account exists.  Returns parts inserted.
    """
    ensure_user(session, config.ADMIN_USER, config.ADMIN_PASSWORD)

    count = session.query(Part).count()
    if count:
        logger.info("Database has %d parts, skipping seed", count)
        return 0

    inserted = 0
    for properties in seed_parts():
        PartsService.create(session, properties)
        inserted += 1
    logger.info("Seeded %d parts", inserted)
    return inserted
