"""
Main entry point for the chat backend.

Usage:
    python -m chat_backend.main

Or with uvicorn directly:
    uvicorn chat_backend.main:app --host 0.0.0.0 --port 5000 --reload
"""

import uvicorn

from chat_backend.config.settings import Config
from chat_backend.fastapi_app import create_fastapi_app
from chat_backend.setup.ioc.container import create_container

# Container is created at module level: Dishka adds middleware, which must
# happen before the app starts
app = create_fastapi_app(create_container())


if __name__ == "__main__":
    debug = Config.is_development()
    print(f"Starting chat backend in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")

    uvicorn.run(
        "chat_backend.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
