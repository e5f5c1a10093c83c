"""
Hostel services: CRUD, search and the derived seat layout.

Import concrete modules directly; the request schemas depend on
``services.hostel.constants``.
"""
