"""Run the greeter API under uvicorn: `python -m greeter`."""

import uvicorn

from greeter.config import get_settings
from greeter.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
