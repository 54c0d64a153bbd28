# Services package init
"""
Announcer Backend — Services Layer
===================================

What:  Business logic between the routes (HTTP) and the store (persistence).

Service Inventory:
    - AnnouncementService: store connection check, announcement listing,
      store initialization, and engine lifecycle
"""
