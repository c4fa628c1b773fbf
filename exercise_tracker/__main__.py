"""Run the API with uvicorn on the configured host and port."""

import uvicorn

from exercise_tracker.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "exercise_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
