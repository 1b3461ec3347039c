"""
Static page routes.

Serves the welcome page and the dashboard from the app's static folder.
Any other file in that folder is served by Flask's own static route.
"""

from flask import Blueprint, Response, current_app, send_from_directory

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/", methods=["GET"])
def index() -> Response:
    """
    Welcome page with the register and login forms.
    """
    return send_from_directory(current_app.static_folder, "index.html")


@pages_bp.route("/dashboard", methods=["GET"])
def dashboard() -> Response:
    """
    Dashboard page.

    Served to anyone: the page itself checks localStorage for a logged-in
    user and redirects to / when there is none. The server does not.
    """
    return send_from_directory(current_app.static_folder, "dashboard.html")
