# crud/posting.py — postings and the purchase workflow
import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

from crud.book import decrement_stock, find_book
from crud.errors import NotFound, OutOfStock
from models import Posting

logger = logging.getLogger(__name__)


async def add_posting(db: AsyncSession, book_id: int, price: Decimal, cond: int,
                      descript: Optional[str]) -> None:
    await db.execute(
        insert(Posting).values(book_id=book_id, price=price, cond=cond, descript=descript)
    )


async def delete_posting(db: AsyncSession, post_id: int) -> bool:
    result = await db.execute(delete(Posting).where(Posting.post_id == post_id))
    return result.rowcount == 1


async def purchase(db: AsyncSession, post_id: int) -> int:
    """
    Sell the copy listed by posting `post_id`.

    Decrements the owning book's quantity and removes the posting, in one
    transaction. Returns the book id.

    Raises
    ------
    NotFound
        If the posting does not exist, or was bought by someone else meanwhile.
    OutOfStock
        If the book has no copies left to take.
    """
    try:
        book_id = await find_book(db, post_id)
        if not await decrement_stock(db, book_id):
            raise OutOfStock(f"book {book_id} has no copies left")
        if not await delete_posting(db, post_id):
            raise NotFound(f"posting {post_id} was already removed")
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Posting %s purchased (book %s)", post_id, book_id)
    return book_id
