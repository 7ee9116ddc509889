from typing import TypeVar

from humane.errors.models import SourceLocation


E = TypeVar("E", bound=BaseException)

LOCATION = SourceLocation(member_name="load", file_path="app.py", line_number=7)


def raised(error: E, cause: BaseException | None = None) -> E:
    """Raise an error, optionally from a cause, and return it with its traceback."""
    try:
        if cause is None:
            raise error
        raise error from cause
    except BaseException:
        return error
