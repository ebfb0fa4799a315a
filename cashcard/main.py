import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cashcard.core.config import get_settings
from cashcard.core.errors import AppError
from cashcard.db.init_db import init_db, seed_demo_cashcards
from cashcard.db.session import SessionLocal
from cashcard.api.routes import auth, cashcards

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # для dev, потом можно ужать
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Создаём таблицы при старте
@app.on_event("startup")
def on_startup():
    init_db()
    if settings.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_demo_cashcards(db)
        finally:
            db.close()
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.APP_ENV)


@app.exception_handler(AppError)
def app_error_handler(request: Request, exc: AppError):
    headers = None
    if exc.status_code == 401:
        scheme = getattr(exc, "scheme", "Basic")
        headers = {"WWW-Authenticate": f'{scheme} realm="cashcards"'}
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error_code": exc.code, "message": exc.message},
        headers=headers,
    )


@app.get("/health")
def health():
    return {"status": "ok"}


# Подключаем роуты
app.include_router(auth.router)
app.include_router(cashcards.router)
