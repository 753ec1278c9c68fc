# Routes package init
"""
VenueMaps Backend — API Routes Package
=======================================

Route Inventory:
    - venue.py:   GET /api/pois, /api/poi/{id}, /api/search,
                  /api/structures, /api/venue
    - health.py:  GET /health
    - pages.py:   GET /  (client page)

Routes stay thin: they call VenueService and convert its HandlerOutcome
into a response. Validation, SDK access and error handling live in the
service.
"""
