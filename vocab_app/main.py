# vocab_app/main.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .config import Settings, get_settings
from .db import make_engine, make_session_factory, ping, create_tables
from .logging_setup import configure_logging
from .schema import Word, SAMPLE_WORD
from .word_store import WordStore, SqlWordStore, InMemoryWordStore
from .chat_client import ChatClient
from .generator import DefinitionGenerator

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

# ───────── App ─────────
app = FastAPI(title="Vocab API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# ───────── Wiring ─────────
async def build_store(settings: Settings) -> WordStore:
    if settings.word_store == "memory":
        app.state.engine = None
        return InMemoryWordStore()
    engine = make_engine(settings.database_url)
    await ping(engine)
    await create_tables(engine)
    app.state.engine = engine
    return SqlWordStore(make_session_factory(engine))


def get_store(request: Request) -> WordStore:
    return request.app.state.store


def get_generator(request: Request) -> DefinitionGenerator:
    return request.app.state.generator


async def word_param(request: Request) -> str:
    form = await request.form()
    word = form.get("word")
    if word is None:
        raise HTTPException(status_code=400, detail="Required parameter 'word' is not present")
    return word


# ───────── Lifecycle ─────────
@app.on_event("startup")
async def on_startup():
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.store = await build_store(settings)
    app.state.generator = DefinitionGenerator(ChatClient(settings))
    logger.info("Word store backend: %s", settings.word_store)


@app.on_event("shutdown")
async def on_shutdown():
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        await engine.dispose()


@app.get("/healthz")
async def healthz():
    return {"ok": True}


# ───────── Pages ─────────
@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html")


@app.get("/get-data", response_class=HTMLResponse)
async def get_data(request: Request):
    return templates.TemplateResponse(request, "get-data.html")


@app.get("/add-word", response_class=HTMLResponse)
async def add_word_form(request: Request):
    return templates.TemplateResponse(request, "add-word.html", {"word": SAMPLE_WORD})


# ───────── Data endpoints ─────────
@app.get("/get-word-list", response_model=List[Word])
async def get_word_list(store: WordStore = Depends(get_store)):
    return await store.list_all()


@app.post("/add-word", response_model=List[Word])
async def add_word(request: Request, store: WordStore = Depends(get_store)):
    # absent fields stay None, submitted empty strings stay ""
    form = await request.form()
    entry = Word(word=form.get("word"), meaning=form.get("meaning"), sentence=form.get("sentence"))
    await store.create(entry)
    logger.info("Word: %s", entry.word)
    logger.info("Meaning: %s", entry.meaning)
    logger.info("Sentence: %s", entry.sentence)
    return await store.list_all()


@app.post("/delete-word")
async def delete_word(word: str = Depends(word_param), store: WordStore = Depends(get_store)) -> bool:
    return await store.delete(word)


@app.post("/generate-word-details", response_model=Word)
async def generate_word_details(
    word: str = Depends(word_param),
    generator: DefinitionGenerator = Depends(get_generator),
):
    return await generator.generate(word)
