"""
Main entry point for the microblog web application.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn microblog.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5001 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from microblog.config.settings import Config


def main():
    debug = Config.APP_ENV == "development"

    print(f"Starting microblog in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")

    uvicorn.run(
        "microblog.fastapi_app:create_fastapi_app",
        factory=True,
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )


if __name__ == "__main__":
    main()
