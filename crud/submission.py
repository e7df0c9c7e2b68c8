# crud/submission.py — seller submissions and their moderation
import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from crud.book import add_book, check_book, get_book_id, increment_stock
from crud.errors import NotFound
from crud.posting import add_posting
from models import Submission
from schemas import SubmissionCreate

logger = logging.getLogger(__name__)


async def get_submissions(db: AsyncSession) -> List[Submission]:
    result = await db.execute(select(Submission).order_by(Submission.sub_id))
    return result.scalars().all()


async def create_submission(db: AsyncSession, data: SubmissionCreate) -> Submission:
    submission = Submission(**data.model_dump())
    db.add(submission)
    await db.commit()
    await db.refresh(submission)
    logger.info("Submission %s received: %r by %r", submission.sub_id, submission.title, submission.author)
    return submission


async def find_submission(db: AsyncSession, sub_id: int) -> Submission:
    result = await db.execute(select(Submission).where(Submission.sub_id == sub_id))
    submission = result.scalar_one_or_none()
    if submission is None:
        raise NotFound(f"submission {sub_id} does not exist")
    return submission


async def delete_submission(db: AsyncSession, sub_id: int) -> None:
    """Remove a submission; NotFound if there was no row to remove."""
    result = await db.execute(delete(Submission).where(Submission.sub_id == sub_id))
    if result.rowcount != 1:
        raise NotFound(f"submission {sub_id} does not exist")


async def approve_submission(db: AsyncSession, sub_id: int, img_path: str) -> int:
    """
    Turn a submission into a public posting.

    A title/author pair seen for the first time becomes a new book with one
    copy, otherwise the existing book gains a copy. A posting is created for
    it and the submission is consumed, all in one transaction. Returns the
    book id.
    """
    try:
        submission = await find_submission(db, sub_id)
        title, author = submission.title, submission.author
        price, cond, descript = submission.price, submission.cond, submission.descript

        if not await check_book(db, title, author):
            await add_book(db, title, author, submission.genre, submission.publisher, img_path)
        else:
            await increment_stock(db, await get_book_id(db, title, author))

        book_id = await get_book_id(db, title, author)
        await add_posting(db, book_id, price, cond, descript)
        await delete_submission(db, sub_id)
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Submission %s approved as a posting of book %s", sub_id, book_id)
    return book_id


async def reject_submission(db: AsyncSession, sub_id: int) -> None:
    try:
        await delete_submission(db, sub_id)
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Submission %s rejected", sub_id)
