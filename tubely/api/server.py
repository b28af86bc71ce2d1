"""
FastAPI Server for the Tubely thumbnail service.

This module builds the HTTP application and runs it under uvicorn.
"""

import logging
from typing import Optional
from datetime import datetime
import threading

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from ..core.config import Config
from ..core.timezone_utils import now_utc
from ..thumbnails.domain.errors import ThumbnailError
from ..thumbnails.integration import ThumbnailModule
from .models import ErrorResponse, SuccessResponse, SystemStatusResponse


class APIServer:
    """FastAPI server for the Tubely thumbnail service"""

    def __init__(self, config: Config, thumbnail_module: ThumbnailModule):
        self.config = config
        self.thumbnail_module = thumbnail_module
        self.logger = logging.getLogger(__name__)

        self.app = FastAPI(title="Tubely Thumbnail API", description="Upload and serve video thumbnails", version="1.0.0")

        # Server state
        self.server_start_time = datetime.now()
        self.running = False
        self._server_thread: Optional[threading.Thread] = None
        self._server: Optional[uvicorn.Server] = None

        self.app.add_middleware(CORSMiddleware, allow_origins=self.config.server.allowed_origins, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

        self._setup_error_handlers()
        self._setup_routes()

    def _setup_error_handlers(self):
        """Map thumbnail errors to their HTTP status"""

        @self.app.exception_handler(ThumbnailError)
        async def thumbnail_error_handler(request: Request, exc: ThumbnailError):
            if exc.status_code >= 500:
                self.logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
            else:
                self.logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")

            body = ErrorResponse(error=exc.kind, details=exc.message)
            return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    def _setup_routes(self):
        """Setup API routes"""

        @self.app.get("/", response_model=SuccessResponse)
        async def root():
            return SuccessResponse(message="Tubely Thumbnail API")

        @self.app.get("/health")
        async def health_check():
            return {"status": "healthy", "timestamp": now_utc().isoformat()}

        @self.app.get("/system/status", response_model=SystemStatusResponse)
        async def get_system_status():
            """Get service status"""
            try:
                return SystemStatusResponse(running=self.running, uptime_seconds=(datetime.now() - self.server_start_time).total_seconds(), thumbnails=await self.thumbnail_module.get_module_status())
            except Exception as e:
                self.logger.error(f"Error getting system status: {e}")
                raise HTTPException(status_code=500, detail=str(e))

        self.app.include_router(self.thumbnail_module.get_api_routes())

    def start(self) -> bool:
        """Start the API server"""
        if self.running:
            self.logger.warning("API server is already running")
            return True

        if not self.config.server.enable_api:
            self.logger.info("API server disabled in configuration")
            return False

        try:
            self.logger.info(f"Starting API server on {self.config.server.api_host}:{self.config.server.api_port}")
            self.running = True

            # Start server in separate thread
            self._server_thread = threading.Thread(target=self._run_server, daemon=True)
            self._server_thread.start()

            return True

        except Exception as e:
            self.logger.error(f"Error starting API server: {e}")
            self.running = False
            return False

    def stop(self) -> None:
        """Stop the API server"""
        if not self.running:
            return

        self.logger.info("Stopping API server...")
        self.running = False

        if self._server:
            self._server.should_exit = True
        if self._server_thread:
            self._server_thread.join(timeout=5)

        self.logger.info("API server stopped")

    def _run_server(self) -> None:
        """Run the uvicorn server"""
        try:
            uvicorn_config = uvicorn.Config(self.app, host=self.config.server.api_host, port=self.config.server.api_port, log_level="info")
            self._server = uvicorn.Server(uvicorn_config)
            self._server.run()
        except Exception as e:
            self.logger.error(f"Error running API server: {e}")
        finally:
            self.running = False
            self._server = None

    def is_running(self) -> bool:
        """Check if API server is running"""
        return self.running
