import argparse
import logging

import uvicorn
from app.core.config import settings

logger = logging.getLogger("app")

def main():
    parser = argparse.ArgumentParser(description="Serve the blog backend API with uvicorn")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind (default: HOST env)")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on (default: PORT env, 8080)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (implied by DEBUG)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    logger.info(f"Listening on {args.host}:{args.port} ({settings.ENVIRONMENT})")
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload or settings.DEBUG)

if __name__ == "__main__":
    main()
