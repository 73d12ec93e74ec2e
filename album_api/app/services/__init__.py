"""
Service layer abstraction.

Services encapsulate the business rules for albums: field validation
and the create/read/update/delete operations over the album store.
Handlers in ``api`` stay thin and delegate here.
"""
