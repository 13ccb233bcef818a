"""
Flask application for the portfolio site.

This module exposes a Flask app factory and the page views. Each recognized
path maps to one top-level template (a "composition") that is rendered from
the static project registry and the page metadata. Dependency injection
hooks keep the factory easy to exercise in tests.
"""


import logging
import os

from flask import Flask, current_app, jsonify, render_template

try:
    from . import config, projects as registry
    from .metadata import METADATA_ERRORS, fallback_metadata, load_page_metadata
except ImportError:  # pragma: no cover - script execution path
    import config
    import projects as registry
    from metadata import METADATA_ERRORS, fallback_metadata, load_page_metadata

TEMPLATE_DIR = os.path.abspath(os.path.join(config.BASE_DIR, "templates"))
LOGGER = logging.getLogger(__name__)

HOME_PATH = "/"
COMPOSITIONS = {
    HOME_PATH: "index.html",
    registry.MORTGAGE_RATES_HREF: "mortgage_rates.html",
}
NOT_FOUND_TEMPLATE = "not_found.html"
NOT_FOUND_MESSAGE = "Sorry, that page does not exist."


def select_composition(path: str):
    """
    Map a URL path to the template that renders it.

    :param path: Request path, e.g. ``/`` or ``/projects/mortgage-rates``.
    :returns: Template name, or None for unrecognized paths.
    """

    return COMPOSITIONS.get(path)


def index():
    """
    Render the landing page: navigation, hero, and the project grid.

    :returns: Rendered HTML response.
    """

    return render_template(
        select_composition(HOME_PATH),
        projects=current_app.config["PROJECTS"],
    )


def mortgage_rates():
    """
    Render the Mortgage Rate Dispersion detail page.

    The chart is referenced by path only; its document is never read here.

    :returns: Rendered HTML response.
    """

    project = registry.find_project(
        registry.MORTGAGE_RATES_HREF, current_app.config["PROJECTS"]
    )
    title = project.title if project is not None else registry.MORTGAGE_RATES_TITLE
    return render_template(
        select_composition(registry.MORTGAGE_RATES_HREF),
        title=title,
        metadata=current_app.config["PAGE_METADATA"],
        widget_src=registry.MORTGAGE_RATES_WIDGET,
        tags=registry.MORTGAGE_RATES_TAGS,
    )


def health():
    """Liveness probe."""

    return jsonify({"status": "healthy"}), 200


def page_not_found(_error):
    """
    Render the explicit not-found page for unrecognized paths.

    :returns: Rendered HTML response with status 404.
    """

    return render_template(NOT_FOUND_TEMPLATE, message=NOT_FOUND_MESSAGE), 404


def resolve_metadata(load_fn, meta_path):
    """
    Load page metadata once, falling back to a placeholder on failure.

    :param load_fn: Callable taking a path and returning the metadata dict.
    :param meta_path: Path passed to ``load_fn``.
    :returns: Metadata dict with an ``updated`` key.
    """

    try:
        return load_fn(meta_path)
    except METADATA_ERRORS:
        LOGGER.exception("Failed to load page metadata from %s", meta_path)
        return fallback_metadata()


def create_app(*, projects=None, load_metadata_fn=None, static_dir=None):
    """
    Create and configure the Flask application.

    Dependency injection hooks are exposed for testability.

    :param projects: Optional registry replacing ``projects.PROJECTS``.
    :param load_metadata_fn: Optional callable replacing ``load_page_metadata``.
    :param static_dir: Optional directory of site assets served at ``/``.
    :raises ValueError: If the registry breaks its invariants.
    :returns: Configured Flask app instance.
    """

    if static_dir is None:
        static_dir = config.get_static_dir()
    if projects is None:
        projects = registry.PROJECTS
    if load_metadata_fn is None:
        load_metadata_fn = load_page_metadata

    # Assets live at the site root (/logo.svg, /widgets/...), not /static.
    app = Flask(
        __name__,
        template_folder=TEMPLATE_DIR,
        static_folder=static_dir,
        static_url_path="",
    )
    app.config["PROJECTS"] = registry.validate_registry(projects)
    app.config["PAGE_METADATA"] = resolve_metadata(load_metadata_fn, config.get_meta_path())

    app.add_url_rule(HOME_PATH, "index", index)
    app.add_url_rule(registry.MORTGAGE_RATES_HREF, "mortgage_rates", mortgage_rates)
    app.add_url_rule("/health", "health", health)
    app.register_error_handler(404, page_not_found)
    LOGGER.info("Portfolio app created with %d project(s)", len(app.config["PROJECTS"]))
    return app
