"""Flask application serving the read-only domain viewer."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from flask import Flask, redirect, render_template, url_for
from jinja2 import TemplateError

from sdb_cli.shared.client import DatabaseClient
from sdb_cli.shared.exceptions import RemoteOperationError
from sdb_cli.shared.logging import Logger
from sdb_cli.table import build_table_view, compute_columns

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
ERROR_TITLE = "Error occurred"


def domain_items_query(name: str) -> str:
    """Return the listing query used by the domain page."""
    return f"select * from {name} where ItemName() > '0' order by ItemName() desc"


def create_app(client: DatabaseClient, logger: Logger) -> Flask:
    """Build the viewer around an already configured client handle.

    Handlers only read ``client`` and the compiled templates, so the app can be
    served by a threaded server.
    """
    app = Flask(__name__, template_folder=str(TEMPLATE_DIR))

    def render_page(template: str, **context: Any) -> str:
        try:
            return render_template(template, **context)
        except TemplateError as exc:
            logger.error(f"Failed to render {template}: {exc}")
            return render_error("Page could not be rendered")

    def render_error(message: str) -> str:
        try:
            return render_template("error.html", title=ERROR_TITLE, message=message)
        except TemplateError as exc:
            logger.error(f"Failed to render error page: {exc}")
            return ERROR_TITLE

    @app.route("/")
    def index():
        return redirect(url_for("list_domains"), code=307)

    @app.route("/domain")
    def list_domains():
        try:
            names = client.list_domains()
        except RemoteOperationError as exc:
            return render_error(exc.diagnostic())
        return render_page("domains.html", title="Available domains", domains=names)

    @app.route("/domain/<name>")
    def show_domain(name: str):
        if not name.strip():
            return render_error("Domain name can not be empty")
        try:
            records = client.select(domain_items_query(name))
        except RemoteOperationError as exc:
            logger.debug(f"select for domain {name!r} failed with response: {exc.response}")
            return render_error(exc.diagnostic())
        table = build_table_view(records, compute_columns(records)) if records else None
        return render_page("items.html", title=f"Items for domain: {name}", table=table)

    return app
