from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import time
from sqlalchemy.exc import OperationalError

from unoform.api.routes import router
from unoform.config import CORS_ORIGINS
from unoform.db.session import engine
from unoform.db.models import Base

app = FastAPI(
    title="Unoform Kitchen Style Service",
    version="0.1.0",
)

# Middleware before routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.on_event("startup")
def startup():
    retries = 5
    delay = 2

    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=engine)
            print("✅ Database connected")
            return
        except OperationalError:
            print(f"⏳ Waiting for database... ({attempt + 1}/{retries})")
            time.sleep(delay)

    # generation still works, it just is not logged
    print("⚠️ Database not ready — running without persistence")
