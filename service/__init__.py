"""
Package: service
Create and configure the Flask app, logging, and the stocks store
"""

import sys
from flask import Flask
from service import config
from service.common import log_handlers

# -----------------------------------------------------------------------------
# One global Flask app so `from service import app` gets the instance with
# every route registered; create_app() hands out the same object
# -----------------------------------------------------------------------------
app = Flask(__name__)
app.config.from_object(config)
# Keep Cyrillic text readable in JSON responses
app.json.ensure_ascii = False

# Register the XML store
from service.models import store, StoreError  # pylint: disable=wrong-import-position
store.init_app(app)

with app.app_context():
    # Import after the app exists so @app.route binds to this app
    from service import routes, models  # noqa: F401  pylint: disable=unused-import, wrong-import-position
    from service.common import error_handlers, cli_commands  # noqa: F401  pylint: disable=unused-import, wrong-import-position
    from service.ui import ui_bp  # pylint: disable=wrong-import-position

    app.register_blueprint(ui_bp)

    # Set up logging before touching the store so failures reach the console
    log_handlers.init_logging(app, "gunicorn.error")

    try:
        store.init_store()
    except StoreError as err:
        app.logger.critical("%s: Cannot continue", err)
        sys.exit(4)

    app.logger.info(70 * "*")
    app.logger.info("  S T O C K S   S E R V I C E   I N I T  ".center(70, "*"))
    app.logger.info(70 * "*")


def create_app():
    """Factory-style accessor to the (already created) global app."""
    return app
