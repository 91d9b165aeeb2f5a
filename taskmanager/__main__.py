# taskmanager/__main__.py
"""Serve the API with uvicorn: ``python -m taskmanager``."""

import uvicorn

from taskmanager.config import HOST, PORT


def main() -> None:
    uvicorn.run("taskmanager.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
