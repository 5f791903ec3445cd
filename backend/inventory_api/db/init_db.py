import argparse
import asyncio
import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.db.base_class import Base
from inventory_api.db.session import Database
# Import the models so Base knows about them
from inventory_api.models import Category, Item

# Logger for the init_db function and module-level messages
logger = logging.getLogger(__name__)

# Starter catalogue shown by the frontend before any data is entered
SAMPLE_CATALOGUE = [
    {
        "category_name": "tshirts",
        "category_image_link": "https://i.imgur.com/Lx33eRx.jpeg",
        "items": [
            {
                "item_name": "black tshirt",
                "item_desc": "High quality black tshirt, soft polyester and wool blend.",
                "item_price": Decimal("15.00"),
                "item_stock": 8,
                "item_status": True,
                "item_image_link": "https://i.imgur.com/WAKEv0i.jpeg",
            },
            {
                "item_name": "navy tshirt",
                "item_desc": "High quality navy tshirt, soft polyester and wool blend.",
                "item_price": Decimal("15.00"),
                "item_stock": 12,
                "item_status": True,
                "item_image_link": "https://i.imgur.com/C65daKi.jpeg",
            },
        ],
    },
    {
        "category_name": "socks",
        "category_image_link": "https://i.imgur.com/YqFTtJv.jpeg",
        "items": [
            {
                "item_name": "white socks",
                "item_desc": "Pack of cotton ankle socks.",
                "item_price": Decimal("5.00"),
                "item_stock": 0,
                "item_status": False,
                "item_image_link": None,
            },
        ],
    },
    {
        "category_name": "pants",
        "category_image_link": "https://i.imgur.com/XLumso8.jpeg",
        "items": [],
    },
]

async def init_db(database: Database) -> None:
    logger.info("Initializing database...")
    async with database.engine.begin() as conn:
        try:
            logger.info("Creating all tables...")
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Tables created successfully.")
        except Exception as e:
            logger.error(f"Error during table creation: {e}")
            raise # Re-raise the exception after logging
    logger.info("Database initialization complete.")

async def seed_db(db: AsyncSession) -> int:
    """
    Insert SAMPLE_CATALOGUE when there is no category yet.
    Returns the number of categories added (0 when the table was not empty).
    """
    existing = await db.execute(select(func.count(Category.category_id)))
    if existing.scalar_one() > 0:
        logger.info("Categories already present, skipping seed data.")
        return 0

    for entry in SAMPLE_CATALOGUE:
        category = Category(
            category_name=entry["category_name"],
            category_image_link=entry["category_image_link"],
            items=[Item(**item_data) for item_data in entry["items"]],
        )
        db.add(category)
    await db.commit()
    logger.info(f"Seeded {len(SAMPLE_CATALOGUE)} categories.")
    return len(SAMPLE_CATALOGUE)

async def _run(seed: bool) -> None:
    from inventory_api.core.config import settings

    database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    try:
        await init_db(database)
        if seed:
            async with database.session() as db:
                await seed_db(db)
    finally:
        await database.dispose()

if __name__ == "__main__":
    from inventory_api.core.config import settings
    from inventory_api.core.logging_config import configure_logging

    configure_logging(settings.LOG_LEVEL)
    main_logger = logging.getLogger("__main__")

    parser = argparse.ArgumentParser(description="Create the inventory tables.")
    parser.add_argument("--seed", action="store_true", help="insert the sample catalogue into an empty database")
    args = parser.parse_args()

    if not settings.DATABASE_URL:
        main_logger.error("DATABASE_URL not set in settings. Exiting.")
    else:
        main_logger.info(f"Attempting DB initialization for: {settings.masked_database_url()}")
        try:
            asyncio.run(_run(args.seed))
        except Exception:
            main_logger.exception("An error occurred during database initialization")
            raise SystemExit(1)
