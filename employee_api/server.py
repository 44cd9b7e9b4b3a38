"""
Employee API server entry point.

Run with: uvicorn employee_api.server:app --host 0.0.0.0 --port 8080
or the ``employee-api`` console script.
"""
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

import uvicorn  # noqa: E402

from employee_api.config import settings  # noqa: E402
from employee_api.main import create_app  # noqa: E402
from employee_api.utils.logger import setup_logging  # noqa: E402

setup_logging(settings)

app = create_app(config=settings)


def main() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
