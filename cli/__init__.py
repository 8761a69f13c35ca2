"""CLI package for the Kira realtime server

Starts the FastAPI application under uvicorn and prints a startup summary.
"""

from cli.main import main

__all__ = [
    "main",
]
