from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete

from app.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from app.domains.documents.entities import Document

# Диапазон колонки Id (Integer = int4 в postgres)
ID_MIN = -2**31
ID_MAX = 2**31 - 1


def _id_in_range(document_id: Optional[int]) -> bool:
    return document_id is not None and ID_MIN <= document_id <= ID_MAX


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List["Document"]:
        """Получение всех документов"""
        result = await self.session.execute(
            select(DocumentModel).order_by(DocumentModel.id)
        )
        db_documents = result.scalars().all()
        return [self._to_domain(doc) for doc in db_documents]

    async def get_by_id(self, document_id: int) -> Optional["Document"]:
        """Получение документа по id"""
        if not _id_in_range(document_id):
            return None
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.id == document_id)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def create(self, document: "Document") -> "Document":
        """Создание нового документа, id назначает БД"""
        db_document = DocumentModel(
            title=document.title,
            content=document.content,
            status=document.status,
            author=document.author
        )

        self.session.add(db_document)
        await self.session.commit()
        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def update(self, document: "Document") -> Optional["Document"]:
        """Полная перезапись полей документа по id"""
        if not _id_in_range(document.id):
            return None

        stmt = (
            update(DocumentModel)
            .where(DocumentModel.id == document.id)
            .values({
                DocumentModel.title: document.title,
                DocumentModel.content: document.content,
                DocumentModel.status: document.status,
                DocumentModel.author: document.author
            })
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_id(document.id)

    async def delete(self, document_id: int) -> bool:
        """Удаление документа, отсутствующий id не ошибка"""
        if not _id_in_range(document_id):
            return False
        stmt = delete(DocumentModel).where(DocumentModel.id == document_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_document: DocumentModel) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.documents.entities import Document

        return Document(
            id=db_document.id,
            title=db_document.title,
            content=db_document.content,
            status=db_document.status,
            author=db_document.author
        )
