#!/usr/bin/env python3
"""
Site Search Suggestion API
Run script for the FastAPI application
"""

import os
import uvicorn

if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))
    host = os.getenv("HOST", "0.0.0.0")

    print(f"🚀 Starting Site Search Suggestion API")
    print(f"📍 Server will run on http://{host}:{port}")
    print(f"📚 API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "sitesearch.main:app",
        host=host,
        port=port,
        reload=os.getenv("RELOAD", "false").lower() == "true",
        access_log=True
    )
