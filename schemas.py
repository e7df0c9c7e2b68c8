from decimal import Decimal

from pydantic import BaseModel
from typing import Optional


class PostingDetail(BaseModel):
    """One posting joined with the book it lists."""
    post_id: int
    book_id: int
    price: float
    cond: int
    descript: Optional[str] = None
    title: str
    author: str
    genre: Optional[str] = None
    publisher: Optional[str] = None
    img_path: str
    quantity: int

    class Config:
        from_attributes = True


class SubmissionBase(BaseModel):
    title: str
    author: str
    genre: Optional[str] = None
    publisher: Optional[str] = None
    price: float
    cond: int
    descript: Optional[str] = None


class SubmissionCreate(SubmissionBase):
    price: Decimal


class Submission(SubmissionBase):
    sub_id: int

    class Config:
        from_attributes = True
