#!/usr/bin/env python3
"""
TablePoker - Server Startup Script

Usage:
    python run.py [--host HOST] [--port PORT] [--reload]
                  [--chips-file PATH] [--resume]
"""

import argparse
import os

import uvicorn

from tablepoker.persistence import CHIPS_FILE_ENV


def main():
    parser = argparse.ArgumentParser(description="TablePoker Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--chips-file", help="JSON file where chip counts are saved")
    parser.add_argument("--resume", action="store_true", help="Resume saved chip counts")
    args = parser.parse_args()

    if args.chips_file:
        os.environ[CHIPS_FILE_ENV] = args.chips_file

    if args.resume:
        from tablepoker.server.app import create_app
        uvicorn.run(create_app(resume=True), host=args.host, port=args.port)
        return

    uvicorn.run(
        "tablepoker.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
