import logging

from sqlalchemy import func, insert, select, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.core.db import Base
from app.db.models.document import Document as DocumentModel

logger = logging.getLogger(__name__)

# Те же строки, что заливает миграция 0002_seed_documents
SEED_DOCUMENTS = [
    {"id": n, "title": f"Document {n}", "author": f"Author of Document {n}"}
    for n in range(1, 6)
]


async def init_db(engine: AsyncEngine) -> None:
    """Создание таблиц и заливка seed-данных в пустую таблицу"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSession(engine) as session:
        count = (await session.execute(select(func.count()).select_from(DocumentModel))).scalar_one()
        if count:
            logger.info(f"Documents table already holds {count} row(s), seed skipped")
            return

        await session.execute(insert(DocumentModel), SEED_DOCUMENTS)
        if engine.dialect.name == "postgresql":
            await session.execute(text(
                """SELECT setval(pg_get_serial_sequence('"Documents"', 'Id'), (SELECT MAX("Id") FROM "Documents"))"""
            ))
        await session.commit()
        logger.info(f"Seeded {len(SEED_DOCUMENTS)} documents")
