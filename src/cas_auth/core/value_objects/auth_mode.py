"""Authorization mode value object."""

from enum import Enum


class AuthMode(str, Enum):
    """How an unauthenticated request is treated.

    BOUNCE sends the user to the CAS login page, BOUNCE_REDIRECT does the same
    but sends already-authenticated users on to ``redirectTo``, and BLOCK
    answers 401 without involving CAS.
    """

    BOUNCE = "bounce"
    BOUNCE_REDIRECT = "bounce_redirect"
    BLOCK = "block"
