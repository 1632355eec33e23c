"""Run the homepage and API with uvicorn: ``python -m general_phones``."""

import uvicorn

from general_phones.infra.config import log_level, server_host, server_port


def main() -> None:
    uvicorn.run(
        "general_phones.entrypoints.http.app:app",
        host=server_host(),
        port=server_port(),
        log_level=log_level().lower(),
    )


if __name__ == "__main__":
    main()
