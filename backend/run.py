import uvicorn
import os
import logging
import argparse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("allclear-api-runner")

if __name__ == "__main__":
    # Parse command line arguments
    parser = argparse.ArgumentParser(description="AllClear API Server")
    parser.add_argument("--host", default=os.getenv("API_HOST", "0.0.0.0"), help="Interface to bind")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "5001")), help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart the server when code changes")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "info"), help="Uvicorn log level")
    args = parser.parse_args()

    # The app reads LOG_LEVEL when it is created, including in reload workers
    os.environ["LOG_LEVEL"] = args.log_level.upper()

    logger.info(f"Starting AllClear API on {args.host}:{args.port}...")
    logger.info(f"Health check: http://localhost:{args.port}/api/health")
    uvicorn.run("main:app", host=args.host, port=args.port, reload=args.reload, log_level=args.log_level.lower())
