"""UI blueprint for the Stocks service.

Serves the single page that lists the stocks and adds new ones. The page
talks to the REST API through /static/js/script.js.
"""

from flask import Blueprint, render_template


# Serve templates from service/templates and static assets from service/static
ui_bp = Blueprint(
    "ui",
    __name__,
    template_folder="../templates",
    static_folder="../static",
)


@ui_bp.route("/", methods=["GET"])
def index():
    """Stocks page"""
    return render_template("index.html", title="Акции")
