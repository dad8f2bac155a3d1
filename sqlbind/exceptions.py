from typing import Any, Optional

__all__ = (
    "DatabaseError",
    "MalformedQuerySpecError",
    "NotFoundError",
    "SQLBindError",
    "SQLBuilderError",
    "SQLParsingError",
    "UnsupportedActionError",
)


class SQLBindError(Exception):
    """Base exception class from which all sqlbind exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLBindError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLBindError):
    """Issues building or generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class MalformedQuerySpecError(SQLBuilderError):
    """A query description does not have the shape a clause expects.

    Raised for ``where`` values that are neither scalars nor lists, ``join``
    mappings without exactly two tables, and empty or non-mapping rows.
    """

    clause: Optional[str]

    def __init__(self, message: str, clause: Optional[str] = None) -> None:
        if clause:
            message = f"{message} (Clause: {clause})"
        super().__init__(message)
        self.clause = clause


class UnsupportedActionError(SQLBuilderError):
    """Raised when a statement action has no builder."""

    action: str

    def __init__(self, action: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Unsupported statement action: {action!r}"
        super().__init__(message)
        self.action = action


class SQLParsingError(SQLBindError):
    """Issues parsing SQL statements."""

    sql: Optional[str]

    def __init__(self, message: Optional[str] = None, sql: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL statement."
        if sql:
            message = f"{message}\nSQL: {sql}"
        super().__init__(message)
        self.sql = sql


class DatabaseError(SQLBindError):
    """Error raised by the underlying database driver."""


class NotFoundError(DatabaseError):
    """A table or row does not exist."""

