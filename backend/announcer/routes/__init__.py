# Routes package init
"""
Announcer Backend — API Routes Package
=======================================

Route Inventory:
    - announcements.py:  GET /api/announcements  (list every announcement)

Static front-end assets are not routed here; main.py mounts them at `/`
after the API router, so /api paths always win.

Routes stay thin: read the request, call the service, return the result.
"""
