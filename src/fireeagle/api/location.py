"""Location API endpoints."""

from collections.abc import Mapping
from typing import Any

from fireeagle.api.base import BaseAPI
from fireeagle.models.location import ResponseFormat, format_url, location_params


class LocationAPI(BaseAPI):
    """FireEagle location API.

    Query, update and look up the authorized user's location. Every method
    returns the body as XML (default) or JSON text, uninterpreted.
    """

    async def location(self, *, format: ResponseFormat | str | None = None) -> str:  # noqa: A002
        """Get the user's current location.

        Args:
            format: ``"xml"`` or ``"json"``; the service defaults to XML
        """
        return await self._get(format_url(self.config.query_url, format))

    async def update_location(
        self,
        location: str | Mapping[str, Any],
        *,
        format: ResponseFormat | str | None = None,  # noqa: A002
    ) -> str:
        """Set the user's location.

        Args:
            location: Free-form address string, or a mapping of FireEagle
                location parameters (``lat``/``lon``, ``place_id``, ...)
            format: ``"xml"`` or ``"json"``
        """
        params = location_params(location)
        return await self._post(format_url(self.config.update_url, format), params)

    async def lookup_location(
        self,
        location: str | Mapping[str, Any],
        *,
        format: ResponseFormat | str | None = None,  # noqa: A002
    ) -> str:
        """Disambiguate a location before updating.

        Results can be passed to ``update_location`` (e.g. by ``place_id``)
        so the service parses the location the way the lookup did.
        """
        params = location_params(location)
        return await self._get(format_url(self.config.lookup_url, format), params)
