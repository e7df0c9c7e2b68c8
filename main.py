# main.py — second-hand bookstore: JSON/text API plus the shop, sell and admin pages
import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from pathlib import Path
from typing import List

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, get_settings
from crud.book import get_posting, get_postings, get_postings_by_genre
from crud.errors import StoreError
from crud.posting import purchase
from crud.submission import approve_submission, create_submission, get_submissions, reject_submission
from database import get_db, init_db
from schemas import PostingDetail, Submission, SubmissionCreate
from services.genres import read_genres

BASE_DIR = Path(__file__).resolve().parent
SERVER_ERROR = "Something went wrong on the server... Please try again later."
NOT_FOUND = "No results found."

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


def resolve(path: str) -> Path:
    p = Path(path)
    return p if p.is_absolute() else BASE_DIR / p


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


app = FastAPI(title="Second-hand Bookstore", lifespan=lifespan)
app.mount("/static", StaticFiles(directory=resolve(settings.static_dir)), name="static")
templates = Jinja2Templates(directory=resolve(settings.templates_dir))


# ─────────────────────── ERROR MAPPING ───────────────────────
# Every failure, bad form input included, leaves the API as a fixed
# plain-text 500; only the posting lookup answers 404.

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse(SERVER_ERROR, status_code=500)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # missing or malformed form fields are a server failure, not a 422
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse(SERVER_ERROR, status_code=500)


@app.exception_handler(SQLAlchemyError)
@app.exception_handler(OSError)
@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    if settings.debug:
        logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
    else:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse(SERVER_ERROR, status_code=500)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# ─────────────────────── PAGES ───────────────────────

@app.get("/", response_class=HTMLResponse)
async def shop_page(request: Request):
    return templates.TemplateResponse(request, "index.html", {"title": "Shop"})


@app.get("/sell", response_class=HTMLResponse)
async def sell_page(request: Request):
    return templates.TemplateResponse(request, "sell.html", {"title": "Sell a book"})


@app.get("/admin", response_class=HTMLResponse)
async def admin_page(request: Request):
    return templates.TemplateResponse(request, "admin.html", {"title": "Review submissions"})


# ─────────────────────── GET ENDPOINTS ───────────────────────

@app.get("/posting/all", response_model=List[PostingDetail])
async def all_postings(db: AsyncSession = Depends(get_db)):
    return await get_postings(db)


@app.get("/book/filter", response_model=List[str])
async def genre_list(config: Settings = Depends(get_settings)):
    return await read_genres(resolve(config.genres_file))


@app.get("/posting/{post_id}", response_model=List[PostingDetail])
async def posting_by_id(post_id: int, db: AsyncSession = Depends(get_db)):
    rows = await get_posting(db, post_id)
    if not rows:
        raise HTTPException(404, NOT_FOUND)
    return rows


@app.get("/book/filter/{genre}", response_model=List[PostingDetail])
async def postings_by_genre(genre: str, db: AsyncSession = Depends(get_db)):
    # an unknown genre is just an empty shelf
    return await get_postings_by_genre(db, genre)


@app.get("/submissions", response_model=List[Submission])
async def submission_list(db: AsyncSession = Depends(get_db)):
    return await get_submissions(db)


# ─────────────────────── POST ENDPOINTS ───────────────────────

@app.post("/purchase", response_class=PlainTextResponse)
async def purchase_posting(postid: int = Form(...), db: AsyncSession = Depends(get_db)):
    await purchase(db, postid)
    return "Successfully updated tables"


@app.post("/submission", response_class=PlainTextResponse)
async def submit_posting(
    title: str = Form(...),
    author: str = Form(...),
    genre: str = Form(""),
    price: Decimal = Form(...),
    condition: int = Form(...),
    publisher: str = Form(""),
    description: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    data = SubmissionCreate(
        title=title,
        author=author,
        genre=genre or None,
        publisher=publisher or None,
        price=price,
        cond=condition,
        descript=description or None,
    )
    await create_submission(db, data)
    return "The posting is successfully submitted for review"


@app.post("/add", response_class=PlainTextResponse)
async def approve(
    subid: int = Form(...),
    db: AsyncSession = Depends(get_db),
    config: Settings = Depends(get_settings),
):
    await approve_submission(db, subid, config.default_image)
    return "This submission is entered as a public posting"


@app.post("/del", response_class=PlainTextResponse)
async def reject(subid: int = Form(...), db: AsyncSession = Depends(get_db)):
    await reject_submission(db, subid)
    return "This submission is successfully removed"


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port)
