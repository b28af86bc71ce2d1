"""
Main Application Coordinator for the Tubely thumbnail service.

This module wires configuration, logging, the thumbnail module and the API
server together and provides graceful startup/shutdown.
"""

import signal
import time
import logging
import sys
from typing import Optional
from datetime import datetime

from .core.config import Config
from .core.logging_config import setup_logging, get_error_tracker
from .core.timezone_utils import configure_timezone, format_timestamp
from .thumbnails.integration import create_thumbnail_module
from .api.server import APIServer


class TubelyService:
    """Main application coordinator for the thumbnail service"""

    def __init__(self, config_file: Optional[str] = None):
        # Load configuration first (basic logging will be used initially)
        self.config = Config(config_file)

        self.logger_setup = setup_logging(log_level=self.config.system.log_level, log_file=self.config.system.log_file)
        self.logger = logging.getLogger(__name__)
        self.error_tracker = get_error_tracker("main_system")

        configure_timezone(self.config.system.timezone)

        self.thumbnail_module = create_thumbnail_module(self.config)
        self.api_server = APIServer(self.config, self.thumbnail_module)

        # System state
        self.running = False
        self.start_time: Optional[datetime] = None

        self._setup_signal_handlers()

        self.logger.info("Tubely thumbnail service initialized")

    def _setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown"""

        def signal_handler(signum, frame):
            self.logger.info(f"Received signal {signum}, initiating graceful shutdown...")
            self.stop()

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    def start(self) -> bool:
        """Start the service"""
        if self.running:
            self.logger.warning("Service is already running")
            return True

        self.logger.info(f"Starting Tubely thumbnail service at {format_timestamp()}...")
        self.start_time = datetime.now()

        try:
            if not self.api_server.start():
                self.error_tracker.log_warning("API server did not start", "api_startup")
                return False
        except Exception as e:
            self.error_tracker.log_error(e, "api_startup")
            return False

        self.running = True
        self.logger.info(f"Thumbnails served at http://{self.config.server.public_host}:{self.config.server.api_port}/api/thumbnails/<video_id>")
        return True

    def stop(self) -> None:
        """Stop the service gracefully"""
        if not self.running:
            return

        self.logger.info("Stopping Tubely thumbnail service...")
        self.running = False

        try:
            self.api_server.stop()

            if self.start_time:
                uptime = (datetime.now() - self.start_time).total_seconds()
                self.logger.info(f"Service uptime: {uptime:.1f} seconds")

            self.logger.info("Tubely thumbnail service stopped")

        except Exception as e:
            self.logger.error(f"Error during shutdown: {e}")

    def run(self) -> None:
        """Run the service (blocking call)"""
        if not self.start():
            self.logger.error("Failed to start service")
            return

        try:
            self.logger.info("Service running... Press Ctrl+C to stop")

            while self.running and self.api_server.is_running():
                time.sleep(1)

        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")
        finally:
            self.stop()


def main():
    """Main entry point for the application"""
    import argparse

    parser = argparse.ArgumentParser(description="Tubely thumbnail service")
    parser.add_argument("--config", type=str, help="Path to configuration file", default="config.json")
    parser.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level", default=None)

    args = parser.parse_args()

    try:
        service = TubelyService(args.config)

        if args.log_level:
            logging.getLogger().setLevel(getattr(logging, args.log_level))

        service.run()
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
