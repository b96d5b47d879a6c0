"""
Sample catalog entries inserted on first start-up.

Usage:
    # From the lifespan (no-op once the catalog has data)
    await seed_if_empty()

    # Manually
    python -m toolcatalog.db.seed
"""
import logging

from sqlalchemy import select

from toolcatalog.core.database import AsyncSessionLocal
from toolcatalog.models import Tool

logger = logging.getLogger(__name__)


TOOLS_SAMPLE = [
    {
        "title": "Calculadora PRICE",
        "category": "Agro",
        "description": "Amortizações crescente/decrescente/linear com antecipação parcial.",
        "image_url": "https://picsum.photos/seed/price/800/450",
        "link_url": "https://exemplo.bb/price",
        "badge": "Novo",
    },
    {
        "title": "Dashboard Inadimplência",
        "category": "Agro",
        "description": "KPIs de atraso por prefixo, agência e produto.",
        "image_url": "https://picsum.photos/seed/inad/800/450",
        "link_url": "https://exemplo.bb/inadimplencia",
        "badge": "Atualizado",
    },
    {
        "title": "Catálogo Super PF3",
        "category": "Agro",
        "description": "Página com todas as ferramentas do Núcleo.",
        "image_url": "https://picsum.photos/seed/catalogo/800/450",
        "link_url": "https://exemplo.bb/catalogo",
        "badge": None,
    },
]


async def seed_if_empty() -> bool:
    """
    Insert the sample tools if the catalog is empty.

    Returns:
        True if seeding occurred, False if data already exists.
    """
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Tool.id).limit(1))
        if result.scalar() is not None:
            return False

        session.add_all([Tool(**t) for t in TOOLS_SAMPLE])
        await session.commit()

    logger.info("Seeded %d sample tools", len(TOOLS_SAMPLE))
    return True


if __name__ == "__main__":
    import asyncio

    from toolcatalog.core.database import engine
    from toolcatalog.core.logging_config import configure_logging
    from toolcatalog.models import Base

    configure_logging()

    async def main():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        if not await seed_if_empty():
            logger.info("Catalog already has data, nothing to seed")

        await engine.dispose()

    asyncio.run(main())
