"""
Medsite Backend — Middleware Package
=====================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for every log line of the request
    2. Logging: one access line per request with status and duration
    3. GZip / CORS: Starlette built-ins configured in main.py

Authentication is not middleware: protected routes declare the
`require_admin` dependency (see medsite/auth.py).
"""
