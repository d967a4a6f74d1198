# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Trivia Night server entry point.

Serves the host, leaderboard and signup pages and mounts the Socket.IO
endpoint next to them on a single ASGI app.
"""

import os
from typing import Optional

import socketio
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from trivia_night import __version__
from trivia_night.src.application.bootstrap import GameServices
from trivia_night.src.config.app_config import AppConfig
from trivia_night.src.monitoring import get_logger, setup_logging
from trivia_night.src.routes.factories.websocket_handlers_state import TriviaWebSocketHandlers

logger = get_logger(__name__)


class NoCacheHTMLStaticFiles(StaticFiles):
    """Static files where HTML pages are never cached.

    Browsers (and the WebView2 stream overlay) must always load the current
    page logic; scripts, styles and images may still be cached.
    """

    def file_response(self, full_path, stat_result, scope, status_code=200):
        response = super().file_response(full_path, stat_result, scope, status_code)
        if str(full_path).endswith(".html"):
            response.headers["Cache-Control"] = "no-store"
        return response


def create_fastapi_app(config: AppConfig, services: GameServices) -> FastAPI:
    """Build the HTTP side: health endpoint plus static front-end pages."""
    app = FastAPI(title="Trivia Night", version=__version__)

    @app.get("/api/health")
    async def health():
        state = services.state
        return {
            "status": "healthy",
            "version": __version__,
            "teams": len(state.teams),
            "question_count": state.question_count,
            "display_mode": state.display_mode.value,
        }

    if config.static_dir.is_dir():
        app.mount("/", NoCacheHTMLStaticFiles(directory=config.static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory not found, front-end pages disabled: {config.static_dir}")

    return app


def create_app(
    config: Optional[AppConfig] = None,
    sio: Optional[socketio.AsyncServer] = None,
) -> socketio.ASGIApp:
    """
    Build the complete ASGI application.

    Args:
        config: Server configuration (read from the environment if omitted)
        sio: Socket.IO server to register handlers on (created if omitted)

    Returns:
        ASGI app serving Socket.IO at /socket.io and HTTP everywhere else
    """
    config = config or AppConfig.from_env()
    sio = sio or socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=config.cors_allowed_origins,
    )

    handlers = TriviaWebSocketHandlers(sio)
    handlers.register()

    fastapi_app = create_fastapi_app(config, handlers.services)
    return socketio.ASGIApp(sio, other_asgi_app=fastapi_app)


def log_startup_banner(config: AppConfig) -> None:
    base = config.base_url
    logger.info("Trivia Night is running!")
    logger.info(f"Host dashboard  ->  {base}/host.html")
    logger.info(f"Leaderboard     ->  {base}/leaderboard.html")
    logger.info(f"Team join page  ->  {base}/signup.html")
    logger.info("For teams on the same WiFi, share your local IP instead of localhost.")


def main() -> None:
    """Console entry point: configure logging and serve until interrupted."""
    config = AppConfig.from_env()
    setup_logging(config.log_level, use_colors=os.environ.get("NO_COLOR") is None)

    app = create_app(config)
    log_startup_banner(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
