from __future__ import annotations

import uvicorn

from cashpoint.engine import load_module_app
from cashpoint.logger import get_logger, setup_logger
from cashpoint.settings import get_settings


def main() -> None:
    settings = get_settings()
    setup_logger(settings.log_level, json_logs=settings.log_json)
    logger = get_logger("cashpoint.server")

    app = load_module_app(settings.module)
    logger.info(
        "server_starting",
        module=settings.module,
        note_formats=settings.note_formats,
        host=settings.host,
        port=settings.port,
    )
    logger.info(f"Checkout http://localhost:{settings.port}")

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
