"""Allow running as ``python -m selector_builder``."""

from selector_builder.cli.main import app

if __name__ == "__main__":
    app()
