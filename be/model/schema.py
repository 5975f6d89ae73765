"""Record types for users, books, orders and reviews.

``New*`` models are what a caller hands to the store when creating a record;
the matching record model adds the store-generated fields (``id`` and, except
for users, ``created_at``). ``BookPatch`` and ``OrderPatch`` carry the fields
an update may touch, so a patch can never rewrite an identifier or timestamp.
Stored records are frozen; the store replaces them with a patched copy.
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# ordered from best to worst
BOOK_CONDITIONS = ("全新", "九成新", "八成新", "七成新", "六成新以下")

BOOK_SUBJECTS = (
    "通識課程",
    "理工科學",
    "人文社會",
    "商業管理",
    "語言學習",
    "藝術設計",
    "醫學健康",
    "法律政治",
    "其他",
)

BOOK_STATUSES = ("available", "reserved", "sold")

BookCondition = Literal[BOOK_CONDITIONS]
BookSubject = Literal[BOOK_SUBJECTS]
BookStatus = Literal[BOOK_STATUSES]


class NewUser(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: Optional[str] = None
    school: Optional[str] = None


class User(NewUser):
    model_config = ConfigDict(frozen=True)

    id: str

    def public(self) -> dict:
        """Everything but the password."""
        return self.model_dump(exclude={"password"})


class NewBook(BaseModel):
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    subject: BookSubject
    price: int = Field(..., gt=0)
    condition: BookCondition
    description: Optional[str] = None
    image_url: Optional[str] = None
    seller_id: str = Field(..., min_length=1)
    status: BookStatus = "available"


class Book(NewBook):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: Optional[datetime] = None


class BookPatch(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1)
    subject: Optional[BookSubject] = None
    price: Optional[int] = Field(None, gt=0)
    condition: Optional[BookCondition] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: Optional[BookStatus] = None


class NewOrder(BaseModel):
    book_id: str = Field(..., min_length=1)
    buyer_id: str = Field(..., min_length=1)
    seller_id: str = Field(..., min_length=1)
    status: str = "pending"
    message: Optional[str] = None


class Order(NewOrder):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: Optional[datetime] = None


class OrderPatch(BaseModel):
    status: Optional[str] = Field(None, min_length=1)
    message: Optional[str] = None


class NewReview(BaseModel):
    seller_id: str = Field(..., min_length=1)
    buyer_id: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1)
    rating: int
    comment: Optional[str] = None


class Review(NewReview):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: Optional[datetime] = None


class ReviewInput(NewReview):
    """Review as submitted over HTTP, where the rating must be 1 to 5 stars."""

    rating: int = Field(..., ge=1, le=5)
