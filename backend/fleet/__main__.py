"""python -m fleet — start the API server."""

from fleet.main import run

run()
