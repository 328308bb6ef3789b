"""Run the API server: `python -m app` from the `backend/` folder."""

from .main import run

run()
