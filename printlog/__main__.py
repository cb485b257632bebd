"""Run the service with uvicorn: ``python -m printlog``."""

import uvicorn

from printlog.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("printlog.app:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
