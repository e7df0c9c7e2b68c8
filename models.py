# models.py
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, UniqueConstraint
from database import Base


class Book(Base):
    __tablename__ = "books"
    __table_args__ = (
        # a book is identified by its exact (title, author) pair
        UniqueConstraint("title", "author", name="uq_books_title_author"),
        CheckConstraint("quantity >= 0", name="ck_books_quantity"),
    )

    book_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    genre = Column(String(100), nullable=True, index=True)
    publisher = Column(String(255), nullable=True)
    img_path = Column(String(255), nullable=False)
    quantity = Column(Integer, default=0, nullable=False)


class Posting(Base):
    __tablename__ = "postings"
    __table_args__ = (CheckConstraint("cond BETWEEN 1 AND 10", name="ck_postings_cond"),)

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    book_id = Column(Integer, ForeignKey("books.book_id"), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    cond = Column(Integer, nullable=False)
    descript = Column(String, nullable=True)


class Submission(Base):
    __tablename__ = "submissions"
    __table_args__ = (CheckConstraint("cond BETWEEN 1 AND 10", name="ck_submissions_cond"),)

    sub_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    genre = Column(String(100), nullable=True)
    publisher = Column(String(255), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    cond = Column(Integer, nullable=False)
    descript = Column(String, nullable=True)
