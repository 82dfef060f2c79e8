from app.domains.documents.entities import Document
from app.domains.documents.schemas import (
    DocumentBase, DocumentCreate, DocumentUpdate, DocumentResponse
)
from app.domains.documents.services import DocumentService

__all__ = [
    "Document",
    "DocumentBase", "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "DocumentService"
]
