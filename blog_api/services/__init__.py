# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# business logic and database access for a single aggregate:
#
#   post_service  — CRUD + author queries for Post
#   user_service  — user lifecycle and password change for User
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency. Services work on ORM entities; conversion to
# wire records lives in ``blog_api.mappers``.
