"""
TablePoker Server - FastAPI + WebSocket Server Layer
"""

from tablepoker.server.app import app, create_app

__all__ = ["app", "create_app"]
