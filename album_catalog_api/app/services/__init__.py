"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  Keeping the
catalog here, behind a small interface, means the in‑memory list could
later be swapped for a database without changing the API handlers.
"""
