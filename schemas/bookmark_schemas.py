from pydantic import BaseModel, Field
from typing import Optional


class BookmarkBase(BaseModel):
    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    category: Optional[str] = None
    description: Optional[str] = None

    def editable_fields(self):
        """Fields a client may set, with optional text defaulted to an empty string."""
        return {
            'title': self.title,
            'url': self.url,
            'category': self.category or '',
            'description': self.description or ''
        }


class BookmarkCreate(BookmarkBase):
    pass


class BookmarkUpdate(BookmarkBase):
    pass

