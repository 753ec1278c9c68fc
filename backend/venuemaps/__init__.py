"""
VenueMaps Backend — Application Package Initializer
====================================================

What: Marks the `venuemaps` directory as a Python package.
Who:  Used by uvicorn (`uvicorn venuemaps.main:app`) and by pytest.

Architecture Note:
    The backend is a thin proxy in front of the venue-mapping SDK:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (VenueService)        │  ← validation, normalization, envelopes
    ├─────────────────────────────────────┤
    │     Handle cache (lazy singleton)   │  ← one SDK handle per process
    ├─────────────────────────────────────┤
    │   Mapping SDK client (httpx)        │  ← external backend calls
    └─────────────────────────────────────┘

    Routes never talk to the SDK directly; they receive a HandlerOutcome
    from the service layer and only turn it into an HTTP response.
"""

__version__ = "1.0.0"
