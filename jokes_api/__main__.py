"""Process entry point: `python -m jokes_api` or the `jokes-api` console script."""

import uvicorn

from jokes_api.config import get_settings
from jokes_api.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
