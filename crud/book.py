# crud/book.py — book lookups and the posting x book listings
from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from crud.errors import NotFound
from models import Book, Posting

# columns of a posting joined with its book, as the listings expose them
POSTING_COLUMNS = (
    Posting.post_id,
    Posting.book_id,
    Posting.price,
    Posting.cond,
    Posting.descript,
    Book.title,
    Book.author,
    Book.genre,
    Book.publisher,
    Book.img_path,
    Book.quantity,
)


def _postings_query():
    return select(*POSTING_COLUMNS).join(Book, Posting.book_id == Book.book_id).order_by(Posting.post_id)


async def get_postings(db: AsyncSession) -> List[dict]:
    result = await db.execute(_postings_query())
    return [dict(row) for row in result.mappings().all()]


async def get_posting(db: AsyncSession, post_id: int) -> List[dict]:
    """Posting `post_id` with its book, as a list of zero or one rows."""
    result = await db.execute(_postings_query().where(Posting.post_id == post_id))
    return [dict(row) for row in result.mappings().all()]


async def get_postings_by_genre(db: AsyncSession, genre: str) -> List[dict]:
    result = await db.execute(_postings_query().where(Book.genre == genre))
    return [dict(row) for row in result.mappings().all()]


async def find_book(db: AsyncSession, post_id: int) -> int:
    """Book id behind a posting; NotFound if the posting is gone."""
    result = await db.execute(select(Posting.book_id).where(Posting.post_id == post_id))
    book_id = result.scalar_one_or_none()
    if book_id is None:
        raise NotFound(f"posting {post_id} does not exist")
    return book_id


async def check_book(db: AsyncSession, title: str, author: str) -> bool:
    """True if a book with exactly this title and author is already stocked."""
    result = await db.execute(
        select(Book.book_id).where(Book.title == title, Book.author == author)
    )
    return result.scalar_one_or_none() is not None


async def get_book_id(db: AsyncSession, title: str, author: str) -> int:
    result = await db.execute(
        select(Book.book_id).where(Book.title == title, Book.author == author)
    )
    book_id = result.scalar_one_or_none()
    if book_id is None:
        raise NotFound(f"no book titled {title!r} by {author!r}")
    return book_id


async def add_book(db: AsyncSession, title: str, author: str, genre: Optional[str],
                   publisher: Optional[str], img_path: str) -> None:
    """Stock a title/author pair for the first time, with one copy."""
    await db.execute(
        insert(Book).values(
            title=title, author=author, genre=genre, publisher=publisher,
            img_path=img_path, quantity=1,
        )
    )


async def increment_stock(db: AsyncSession, book_id: int) -> None:
    await db.execute(
        update(Book).where(Book.book_id == book_id).values(quantity=Book.quantity + 1)
    )


async def decrement_stock(db: AsyncSession, book_id: int) -> bool:
    """Take one copy off the shelf; False (and no change) if none are left."""
    result = await db.execute(
        update(Book)
        .where(Book.book_id == book_id, Book.quantity > 0)
        .values(quantity=Book.quantity - 1)
    )
    return result.rowcount == 1
