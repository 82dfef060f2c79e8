import logging
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.db import get_db
from app.domains.documents.entities import Document
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate, DocumentResponse
from app.domains.documents.services import DocumentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


def get_document_service(db: AsyncSession = Depends(get_db)) -> DocumentService:
    """Зависимость: сервис документов на сессию запроса"""
    return DocumentService(db)


@router.get("", response_model=List[DocumentResponse], response_model_exclude_none=True)
async def get_documents(
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение списка документов"""
    documents = await document_service.get_all_documents()
    return [DocumentResponse.model_validate(doc) for doc in documents]


@router.get("/{document_id}", response_model=DocumentResponse, response_model_exclude_none=True)
async def get_document(
    document_id: int,
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение документа по id"""
    document = await document_service.get_document_by_id(document_id)

    if not document:
        logger.info(f"Document {document_id} not found")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return DocumentResponse.model_validate(document)


@router.post("", response_model=DocumentResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    request: Request,
    response: Response,
    document_service: DocumentService = Depends(get_document_service)
):
    """Создание нового документа"""
    document = await document_service.create_document(
        Document(
            title=document_data.title,
            author=document_data.author,
            content=document_data.content,
            status=document_data.status
        )
    )
    logger.info(f"Document {document.id} created")

    response.headers["Location"] = str(request.url_for("get_document", document_id=document.id))
    return DocumentResponse.model_validate(document)


@router.put("/{document_id}", response_model=DocumentResponse, response_model_exclude_none=True)
async def update_document(
    document_id: int,
    update_data: DocumentUpdate,
    document_service: DocumentService = Depends(get_document_service)
):
    """Обновление документа, все поля перезаписываются"""
    if update_data.id != document_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Document id in body does not match id in path"
        )

    document = await document_service.update_document(
        Document(
            id=document_id,
            title=update_data.title,
            author=update_data.author,
            content=update_data.content,
            status=update_data.status
        )
    )

    if not document:
        logger.info(f"Document {document_id} not found for update")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    logger.info(f"Document {document_id} updated")
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: int,
    document_service: DocumentService = Depends(get_document_service)
):
    """Удаление документа, отсутствующий id тоже 204"""
    deleted = await document_service.delete_document(document_id)
    logger.info(f"Document {document_id} {'deleted' if deleted else 'already absent'}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
