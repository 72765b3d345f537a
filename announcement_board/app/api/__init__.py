"""
HTTP routes.

``router`` aggregates the public and admin announcement endpoints;
``endpoints.pages`` serves the bundled HTML pages.
"""
