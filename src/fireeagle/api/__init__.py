"""FireEagle API client modules."""

from fireeagle.api.base import BaseAPI
from fireeagle.api.location import LocationAPI

__all__ = ["BaseAPI", "LocationAPI"]
