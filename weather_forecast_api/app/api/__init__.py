"""
HTTP layer.

``router.py`` aggregates the per-domain routers from ``endpoints``;
``dependencies.py`` hands the services built by ``create_app`` to the
route handlers.
"""
