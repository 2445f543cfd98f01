"""Run the API with uvicorn: ``python -m courts_finder``."""
import uvicorn

from courts_finder.core.config import settings


def main():
    uvicorn.run(
        "courts_finder.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
