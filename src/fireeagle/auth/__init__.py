"""OAuth authentication for the FireEagle API."""

from fireeagle.auth.oauth import FireEagleAuth, SignedRequest

__all__ = ["FireEagleAuth", "SignedRequest"]
