import uvicorn

from .config import resolve_app_config
from .constants import DEFAULT_HOST
from .main import create_app


def main() -> None:
    """Resolve configuration once and serve the API on the configured port."""
    config = resolve_app_config()
    uvicorn.run(
        create_app(config), host=DEFAULT_HOST, port=config.port, log_config=None
    )


if __name__ == "__main__":
    main()
