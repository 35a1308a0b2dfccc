"""Run the API with ``python -m fintrackr``."""
import uvicorn

from fintrackr.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "fintrackr.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
