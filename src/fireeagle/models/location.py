"""Location request parameters."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from fireeagle.exceptions import ParameterError


class ResponseFormat(StrEnum):
    """Response body formats the API can return."""

    XML = "xml"
    JSON = "json"


def format_url(url: str, response_format: ResponseFormat | str | None) -> str:
    """Append the ``.xml``/``.json`` suffix to an API endpoint URL.

    ``None`` leaves the URL bare, in which case the service answers in XML.
    """
    if response_format is None:
        return url
    try:
        suffix = ResponseFormat(str(response_format).lower())
    except ValueError:
        raise ParameterError(
            f"Unsupported response format: {response_format!r}",
            field="format",
        ) from None
    return f"{url}.{suffix}"


def location_params(location: str | Mapping[str, Any]) -> dict[str, str]:
    """Turn a location argument into request parameters.

    A plain string is sent as a free-form ``address``. A mapping is taken to
    hold FireEagle location parameters (``lat``, ``lon``, ``place_id``,
    ``postal``, ``q``, ...) and is sent as given. ``None`` values are dropped.
    Keys starting with ``oauth_`` are reserved for the signature and rejected.
    """
    if isinstance(location, str):
        return {"address": location}
    if isinstance(location, Mapping):
        params = {str(k): str(v) for k, v in location.items() if v is not None}
        reserved = sorted(k for k in params if k.startswith("oauth_"))
        if reserved:
            raise ParameterError(
                f"Location parameters may not set OAuth fields: {', '.join(reserved)}",
                field="location",
            )
        return params
    raise ParameterError(
        f"Can't understand location parameter in the form of a {type(location).__name__}",
        field="location",
    )
