from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict
from typing import Any, Optional


class DocumentBase(BaseModel):
    """Базовая схема документа"""
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    content: Optional[str] = None
    status: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        # Имена свойств в JSON сопоставляются без учета регистра
        if isinstance(data, dict):
            return {k.lower() if isinstance(k, str) else k: v for k, v in data.items()}
        return data

    @field_validator('title', 'author')
    @classmethod
    def validate_required(cls, v, info):
        if not v.strip():
            raise ValueError(f'{info.field_name.capitalize()} cannot be empty')
        return v


class DocumentCreate(DocumentBase):
    """Схема для создания документа, id игнорируется"""
    id: Any = None


class DocumentUpdate(DocumentBase):
    """Схема для обновления документа"""
    id: Optional[int] = None


class DocumentResponse(DocumentBase):
    """Схема для ответа с данными документа"""
    id: int

    model_config = ConfigDict(from_attributes=True)
