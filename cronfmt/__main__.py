"""Allow running as `python -m cronfmt`."""

from cronfmt.cli.commands import app

if __name__ == "__main__":
    app()
