"""Row builders for tests."""

from decimal import Decimal

from sqlalchemy import select

from models import Book, Posting, Submission

DEFAULT_IMAGE = "/static/imgs/default.svg"


async def make_book(db, title="Dune", author="Herbert", genre="SciFi", quantity=1):
    book = Book(title=title, author=author, genre=genre, publisher="Ace",
                img_path=DEFAULT_IMAGE, quantity=quantity)
    db.add(book)
    await db.commit()
    return book


async def make_posting(db, book, price="10.00", cond=7, descript="good condition"):
    posting = Posting(book_id=book.book_id, price=Decimal(price), cond=cond, descript=descript)
    db.add(posting)
    await db.commit()
    return posting


async def make_submission(db, title="Dune", author="Herbert", genre="SciFi", price="10.00", cond=7):
    submission = Submission(title=title, author=author, genre=genre, publisher="Ace",
                            price=Decimal(price), cond=cond, descript="good condition")
    db.add(submission)
    await db.commit()
    return submission


async def load_book(db, book_id):
    """Read a book back from the store, overwriting any stale copy in the session."""
    result = await db.execute(
        select(Book).where(Book.book_id == book_id).execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()
