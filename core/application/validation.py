from core.domain.errors import InvalidTaskError

BLANK_DESCRIPTION_MESSAGE = "Task description cannot be blank"


def validate_description(description: str | None) -> None:
    if description is None or not description.strip():
        raise InvalidTaskError(BLANK_DESCRIPTION_MESSAGE)
