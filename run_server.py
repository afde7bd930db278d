#!/usr/bin/env python3
"""Run the kanadrill API server."""

import logging
import os

import uvicorn


def main():
    logging.basicConfig(level=os.environ.get('DRILL_LOG_LEVEL', 'INFO').upper())
    host = os.environ.get('DRILL_HOST', '0.0.0.0')
    port = int(os.environ.get('DRILL_PORT', '8000'))
    print("Starting Kanadrill API server...")
    print(f"API documentation available at: http://localhost:{port}/docs")
    uvicorn.run(
        "server.app:app",
        host=host,
        port=port,
        reload=True
    )


if __name__ == "__main__":
    main()
