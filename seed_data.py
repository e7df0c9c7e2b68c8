# seed_data.py — reset the store and fill it with a few demo rows
import asyncio
from decimal import Decimal

from config import get_settings
from database import AsyncSessionLocal, Base, engine, init_db
from models import Book, Posting, Submission

BOOKS = [
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "genre": "Fantasy", "publisher": "Allen & Unwin",
     "postings": [(Decimal("8.50"), 6, "Spine a little worn"), (Decimal("12.00"), 9, "Like new")]},
    {"title": "Foundation", "author": "Isaac Asimov", "genre": "SciFi", "publisher": "Gnome Press",
     "postings": [(Decimal("6.25"), 5, "Some highlighting in chapter 2")]},
    {"title": "Gone Girl", "author": "Gillian Flynn", "genre": "Mystery", "publisher": "Crown",
     "postings": [(Decimal("4.00"), 7, "")]},
]

SUBMISSIONS = [
    {"title": "Dune", "author": "Frank Herbert", "genre": "SciFi", "publisher": "Ace",
     "price": Decimal("10.00"), "cond": 7, "descript": "good condition"},
]


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await init_db()
    print("🔄 Database reset")

    image = get_settings().default_image
    async with AsyncSessionLocal() as db:
        for b in BOOKS:
            book = Book(title=b["title"], author=b["author"], genre=b["genre"], publisher=b["publisher"],
                        img_path=image, quantity=len(b["postings"]))
            db.add(book)
            await db.flush()
            for price, cond, descript in b["postings"]:
                db.add(Posting(book_id=book.book_id, price=price, cond=cond, descript=descript or None))
        await db.commit()
        print("✅ Books and postings inserted")

        for s in SUBMISSIONS:
            db.add(Submission(**s))
        await db.commit()
        print("✅ Submissions inserted")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
