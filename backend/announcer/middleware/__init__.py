# Middleware package init
"""
Announcer Backend — Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → Route handler / static files

    Request ID runs first so the access log line carries the id; the
    id is written to the response headers on the way back out.
"""
