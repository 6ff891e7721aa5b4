"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Todo
  2xxx: Post
  3xxx: Session
  9xxx: System (store / cache availability)
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Todo ---

class TodoNotFoundError(AppError):
    def __init__(self, todo_id: int) -> None:
        super().__init__(1001, f"Todo not found: {todo_id}", 404)


# --- 2xxx: Post ---

class PostNotFoundError(AppError):
    def __init__(self, post_id: int) -> None:
        super().__init__(2001, f"Post not found: {post_id}", 404)


# --- 3xxx: Session ---

class SessionStoreUnavailableError(AppError):
    def __init__(self, detail: str = "Session store unavailable") -> None:
        super().__init__(3001, detail, 503)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class StoreUnavailableError(AppError):
    """Relational store failed; always fatal to the current request."""

    def __init__(self, detail: str = "Database unavailable") -> None:
        super().__init__(9003, detail, 500)


class CacheUnavailableError(AppError):
    """Cache store failed; never escalated past the cache-aside accessor."""

    def __init__(self, detail: str = "Cache unavailable") -> None:
        super().__init__(9004, detail, 503)
