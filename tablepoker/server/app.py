"""
FastAPI Application Entry Point for TablePoker.

This module creates and configures the FastAPI application with:
- One table session (state owner + effect scheduler)
- HTTP routes for game management
- WebSocket endpoint for real-time updates
- CORS middleware for development
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tablepoker.persistence import ChipStore
from tablepoker.server.routes import router
from tablepoker.server.session import TableSession
from tablepoker.server.websocket import ConnectionManager, websocket_endpoint

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    chips_file: Union[str, Path, None] = None,
    resume: bool = False,
    time_scale: float = 1.0,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        chips_file: Where chip counts are saved (defaults to the
            TABLEPOKER_CHIPS_FILE environment variable)
        resume: Seed the lobby with previously saved chips
        time_scale: Multiplier for every game delay

    Returns:
        Configured FastAPI application instance
    """
    session = TableSession(
        store=ChipStore(chips_file),
        resume=resume,
        time_scale=time_scale,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("TablePoker server starting up...")
        yield
        session.close()
        logger.info("TablePoker server shutting down...")

    app = FastAPI(
        title="TablePoker",
        description="Single-table Texas Hold'em against bots",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.session = session
    app.state.connections = ConnectionManager(session)

    # Include HTTP routes
    app.include_router(router)

    # WebSocket endpoint
    app.websocket("/ws")(websocket_endpoint)

    return app


# Create the application instance
app = create_app()


def main(
    host: str = "0.0.0.0",
    port: int = 8000,
    chips_file: Optional[str] = None,
    resume: bool = False,
):
    """Run the server (for use as entry point)."""
    import uvicorn
    uvicorn.run(create_app(chips_file=chips_file, resume=resume), host=host, port=port)


if __name__ == "__main__":
    main()
