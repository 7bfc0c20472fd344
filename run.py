#!/usr/bin/env python3
"""
Development server runner for the Resumit ATS Engine.
Use this for local development and testing.
"""
import os
import sys

import uvicorn


def main():
    # Add the project directory to the path
    project_dir = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, project_dir)

    # Get configuration from environment
    host = os.getenv("ATS_HOST", "0.0.0.0")
    port = int(os.getenv("ATS_PORT", "8000"))
    debug = os.getenv("ATS_DEBUG", "true").lower() == "true"

    print(f"\n🚀 Starting Resumit ATS Engine")
    print(f"   Host: {host}")
    print(f"   Port: {port}")
    print(f"   Debug: {debug}")
    print(f"\n📚 API Documentation: http://localhost:{port}/docs")
    print(f"📖 ReDoc: http://localhost:{port}/redoc")
    print(f"❤️  Health Check: http://localhost:{port}/api/health\n")

    # Run the server
    uvicorn.run(
        "ats_engine.main:app",
        host=host,
        port=port,
        reload=debug,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
