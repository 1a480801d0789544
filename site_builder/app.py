"""
site_builder — app FastAPI autonome
Démarrer : uvicorn site_builder.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .router import router
from .templates import template_ids
from .themes import theme_ids

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s — %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="site_builder — Templates & thèmes", version=__version__, docs_url="/docs")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

log.info("site_builder prêt : %d templates, %d thèmes", len(template_ids()), len(theme_ids()))


@app.get("/health")
def health():
    return {"status": "ok", "version": __version__, "templates": len(template_ids()), "themes": len(theme_ids())}
