from app.db.models.document import Document

__all__ = [
    "Document",
]
