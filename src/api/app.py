"""FastAPI application entry point."""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import schedule
from src.config import configure_logging, settings

configure_logging()

app = FastAPI(
    title="Mortgage Visualizer",
    description="Mortgage amortization schedules",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schedule.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def serve() -> None:
    uvicorn.run(app, host="0.0.0.0", port=settings.api_port)


if __name__ == "__main__":
    serve()
