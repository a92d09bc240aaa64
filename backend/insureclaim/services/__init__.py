"""
Services package — business rules on top of the repositories.

Services validate a request completely before mutating anything and raise
``insureclaim.core.errors`` exceptions on failure.  They take the session
as their first argument and never commit; the request-scoped session in
the API layer owns the transaction.
"""
