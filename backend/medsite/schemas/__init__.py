"""
Medsite Backend — Request/Response Schemas
===========================================

Request payloads accept every field as optional so missing-field checks
produce the service's own 400 message; response models fix the exact
columns each endpoint exposes.
"""
