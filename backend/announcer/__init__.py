"""
Announcer Backend — Application Package
========================================

Serves a single-page announcement board: static front-end assets plus one
read endpoint backed by the `announcements` table.

Layers:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      AnnouncementService (Logic)    │  ← query, error translation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │     Database & Store (Persistence)  │  ← pooled async engine, seeding
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
