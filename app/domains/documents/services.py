from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.document_repository import DocumentRepository
from app.domains.documents.entities import Document


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)

    async def get_all_documents(self) -> List[Document]:
        """Получение всех документов"""
        return await self.document_repository.get_all()

    async def get_document_by_id(self, document_id: int) -> Optional[Document]:
        """Получение документа по id"""
        return await self.document_repository.get_by_id(document_id)

    async def create_document(self, document: Document) -> Document:
        """Создание нового документа"""
        return await self.document_repository.create(document)

    async def update_document(self, document: Document) -> Optional[Document]:
        """Обновление документа"""
        return await self.document_repository.update(document)

    async def delete_document(self, document_id: int) -> bool:
        """Удаление документа"""
        return await self.document_repository.delete(document_id)
