"""Run the API with uvicorn: ``python -m bloglist``."""

import uvicorn

from .core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("bloglist.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
