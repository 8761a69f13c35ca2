"""
RealtimeServer class for CLI control of the FastAPI application.
"""
import logging
import os
from typing import Optional

import uvicorn

from settings import PORT, LOG_LEVEL, BIND_ADDRESS
from .app import app

logger = logging.getLogger(__name__)

DEBUG_LOG_FILE = "server_debug.log"


class RealtimeServer:
    """Server wrapper for CLI control"""

    def __init__(
        self,
        debug: bool = False,
        bind_address: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
    ):
        self.server = None
        self.config = None
        self.debug = debug
        self.bind_address = bind_address or BIND_ADDRESS
        self.port = port or PORT
        self.log_level = "debug" if debug else (log_level or LOG_LEVEL)

        # Configure debug logging if enabled
        if debug:
            self._setup_debug_logging()

    def _setup_debug_logging(self):
        """Setup debug logging for the server"""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        # Clear existing handlers to avoid duplicates
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        log_file = os.path.abspath(DEBUG_LOG_FILE)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        logger.info(f"Debug logging enabled - appending to {log_file}")

    def run(self):
        """Run the server (blocking)"""
        logger.info(f"Starting realtime token server on http://{self.bind_address}:{self.port}")
        self.config = uvicorn.Config(
            app,
            host=self.bind_address,
            port=self.port,
            log_level=self.log_level,
            access_log=False  # request middleware already logs
        )
        self.server = uvicorn.Server(self.config)
        self.server.run()

    def stop(self):
        """Stop the server"""
        if self.server:
            self.server.should_exit = True
