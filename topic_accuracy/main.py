# FastAPI entry point for the topic accuracy service
# topic_accuracy/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from topic_accuracy.endpoints import (
    questions as questions_router,
    attempts as attempts_router,
    users as users_router,
)
from topic_accuracy.seed import seed_demo_data
from topic_accuracy.utils.config import settings
from topic_accuracy.utils.logger import logger
from topic_accuracy.utils.db import engine, AsyncSessionLocal
from topic_accuracy.models.question import Base

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("Topic Accuracy API starting up...")

    # Create database tables if they don't exist
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_demo_data:
        async with AsyncSessionLocal() as session:
            demo_user_id = await seed_demo_data(session)
        logger.info(f"Demo data available for user {demo_user_id}")

    logger.info("Startup complete.")
    yield
    # On shutdown
    logger.info("Topic Accuracy API shutting down...")
    await engine.dispose()

# --- FastAPI App Initialization ---
app = FastAPI(
    title="Topic Accuracy API",
    description="Per-topic answer accuracy reports computed from recorded question attempts.",
    version="1.0.0",
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this to your frontend's domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Routers ---
app.include_router(questions_router.router, prefix="/questions", tags=["Questions"])
app.include_router(attempts_router.router, prefix="/attempts", tags=["Attempts"])
app.include_router(users_router.router, prefix="/users", tags=["Users"])

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {"message": "Welcome to the Topic Accuracy API"}
