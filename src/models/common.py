from datetime import UTC, datetime

from pydantic import AnyUrl, TypeAdapter

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(UTC)


def _parse_url(value: str) -> str:
    """Parse an absolute URL and return its normalized form.

    Raises:
        pydantic.ValidationError: If the value is not an absolute URL.
    """
    return str(_URL_ADAPTER.validate_python(value))
