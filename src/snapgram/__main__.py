"""Allow running snapgram as ``python -m snapgram``."""

from .cli import cli

if __name__ == "__main__":
    cli()
