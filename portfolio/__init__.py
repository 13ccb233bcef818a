"""Package entrypoint for the portfolio Flask app.

Exposes an app factory and a ready-to-run Flask instance for CLI/WSGI use.
"""

from .config import configure_logging, get_server_settings
from .website import create_app

# Create a default app instance so `flask --app portfolio` works out-of-the-box.
app = create_app()

# Re-export public symbols for importers.
__all__ = ["app", "create_app", "main"]


def main():
    """Run the development server with settings from the environment."""

    configure_logging()
    app.run(**get_server_settings())


if __name__ == "__main__":
    # `python -m portfolio` goes through __main__.py instead.
    main()
