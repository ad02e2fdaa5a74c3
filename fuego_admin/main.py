"""Entry point for the FUEGO admin panel."""

from __future__ import annotations

from fuego_admin.admin_app import FuegoAdminApp
from fuego_admin.logging_config import setup_logging


def main() -> None:
    """Run the Textual application."""
    logger = setup_logging()
    logger.info("Admin panel starting...")
    FuegoAdminApp().run()


if __name__ == "__main__":
    main()
