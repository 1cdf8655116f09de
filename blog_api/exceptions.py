class BlogError(Exception):
    """Base class for domain errors raised by services and mappers."""


class UserNotFoundError(BlogError):
    """A post referenced a user id that does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id
