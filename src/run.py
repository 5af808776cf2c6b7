import sys

import uvicorn
from pydantic import ValidationError

from app.config import get_settings
from app.logger import LOGGING_CONFIG, log


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"])
            if err["type"] == "missing":
                log.error(f"Error: {field} environment variable is required")
            else:
                log.error(f"Invalid {field} environment variable: {err['msg']}")
        sys.exit(1)

    log.info(f"Perplexity MCP HTTP server listening on port {settings.PORT}")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=LOGGING_CONFIG,
        log_level="info",
    )


if __name__ == "__main__":
    main()
