# Services package init
"""
VenueMaps Backend — Services Layer
===================================

What:  Business logic between the routes and the mapping backend.
Why:   Routes stay thin; everything here is testable without HTTP.

Service Inventory:
    - MapSDK (abstract): the mapping SDK capabilities this backend consumes
    - AtriusMapsClient: httpx implementation of MapSDK
    - MapHandleCache: lazy, lock-guarded singleton holding one MapSDK handle
    - normalize(): list / keyed mapping / absent → list
    - VenueService: core logic of the five /api routes, returning HandlerOutcome
"""
