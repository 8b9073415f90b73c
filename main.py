from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from dotenv import load_dotenv

from db import Base, engine
from college_match.models import CutoffRecord  # noqa: F401  (registers the cutoffs table)
from college_match.routes import router as college_match_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("App starting with DATABASE_URL")

app = FastAPI(title="College Cutoff Match API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(college_match_router)


@app.get("/", tags=["meta"], summary="Service status")
def root():
    return {"status": "ok", "service": "college-match"}
