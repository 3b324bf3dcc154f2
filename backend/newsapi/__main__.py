"""Allow `python -m newsapi`."""

from newsapi.main import run

run()
