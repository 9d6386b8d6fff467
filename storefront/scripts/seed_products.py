"""
Replace the product catalog with the products listed in a JSON file. Run from project root:
  python -m storefront.scripts.seed_products products.json
The file holds a list of objects with name, description, price, category and stock.
"""

import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from storefront.adapter.services.database import Database
from storefront.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from storefront.app.use_cases.products import NewProductCommand
from storefront.config import ApplicationConfig
from storefront.domain.entities import Product

logger = logging.getLogger(__name__)


async def seed_products(database: Database, commands: list[NewProductCommand]) -> int:
    """Delete every product, insert the given ones and return how many were added"""
    async with database.session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            deleted = await uow.products.delete_all()
            logger.info(f"Products are deleted ({deleted})")
            for command in commands:
                await uow.products.create(Product(**command.model_dump()))
            await uow.commit()
    logger.info(f"Products are added ({len(commands)})")
    return len(commands)


async def _run(path: str) -> int:
    with open(path, "r") as r_file:
        raw_products = json.load(r_file)

    try:
        commands = [NewProductCommand(**item) for item in raw_products]
    except (TypeError, ValidationError) as e:
        print(f"Invalid product data: {e}", file=sys.stderr)
        return 1

    database = Database(ApplicationConfig.DB_URI)
    try:
        await database.init(create_tables=True)
        await seed_products(database, commands)
    finally:
        await database.close()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the product catalog.")
    parser.add_argument("path", help="JSON file with a list of products")
    args = parser.parse_args()

    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)
    return asyncio.run(_run(args.path))


if __name__ == "__main__":
    sys.exit(main())
