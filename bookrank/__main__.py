"""
Run the API server: python -m bookrank
"""

import uvicorn

from bookrank.core.config import settings


def main() -> None:
    uvicorn.run(
        "bookrank.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
