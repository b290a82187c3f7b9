import argparse
import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from api.category_api import CategoryAPI
from services.category_service import CategoryService
from ui.app_window import AppWindow
from utils.app_config import get_appearance_mode, resolve_api_base_url


def main():
    parser = argparse.ArgumentParser(description="Manage categories against a REST API")
    parser.add_argument(
        "--api-url",
        help="Base URL of the category API (default: $CATEGORY_API_URL or config file)",
    )
    parser.add_argument(
        "--save-api-url",
        action="store_true",
        help="Remember --api-url in ~/.category_manager/config.json for later runs",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    # ── Logging ──────────────────────────────────────────────────────────────
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # ── Data access ──────────────────────────────────────────────────────────
    base_url = resolve_api_base_url(args.api_url, save=args.save_api_url)
    logging.getLogger(__name__).info("Using category API at %s", base_url)
    api = CategoryAPI(base_url)
    category_svc = CategoryService(api)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(get_appearance_mode())
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(category_service=category_svc)

    def on_close():
        api.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
