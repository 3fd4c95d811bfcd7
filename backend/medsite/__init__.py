"""
Medsite Backend — Application Package Initializer
==================================================

What: REST backend for the medical-college website (admins, countries,
      colleges, blogs, customer leads).
Who:  Imported by uvicorn (`medsite.main:app`), pytest, and the `medsite`
      console script.

Layers:

    ┌─────────────────────────────────────┐
    │     Routes (HTTP, auth gate)        │  ← status codes, request parsing
    ├─────────────────────────────────────┤
    │     Services (resource handlers)    │  ← validation, pre-checks, writes
    ├─────────────────────────────────────┤
    │     Models & Schemas                │  ← SQLAlchemy tables + Pydantic
    ├─────────────────────────────────────┤
    │     Database gateway                │  ← one async pool, execute()
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
