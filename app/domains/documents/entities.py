from dataclasses import dataclass
from typing import Optional


@dataclass
class Document:
    """Сущность документа домена Documents"""
    title: str
    author: str
    content: Optional[str] = None
    status: Optional[str] = None
    # id назначает хранилище при создании, дальше не меняется
    id: Optional[int] = None
