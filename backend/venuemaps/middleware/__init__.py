# Middleware package init
"""
VenueMaps Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.
Why:   Rate limiting, correlation IDs and access logging apply to every
       route alike; keeping them here keeps routes/venue.py a thin
       pass-through to VenueService.

Middleware Chain (request direction, order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [GZip] → [CORS] → Route

    Why this order:
    1. Rate Limit: rejects over-limit clients before any SDK work
    2. Request ID: correlation ID for the access log and the response header
    3. Logging: one line per request with status and duration
"""
