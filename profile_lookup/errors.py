"""
Errors raised by the profile lookup path.
"""
from typing import Optional


class ProfileLookupError(Exception):
    """Base class for every lookup failure."""

    def __init__(self, message: str, username: Optional[str] = None):
        super().__init__(message)
        self.username = username


class InvalidUsername(ProfileLookupError):
    """The requested username does not pass the format check."""

    def __init__(self, username):
        super().__init__("invalid username", username=username)


class FetchFailure(ProfileLookupError):
    """
    The record could not be read from the store.

    Connection, lookup, missing-key and decode problems all surface as this
    one kind. ``stage`` names where it happened (connect, lookup or decode)
    for diagnostics only.
    """

    CONNECT = 'connect'
    LOOKUP = 'lookup'
    DECODE = 'decode'

    def __init__(self, username: str, stage: str, detail: str = ''):
        message = f"profile fetch failed at {stage}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, username=username)
        self.stage = stage


class InvalidEmail(ProfileLookupError):
    """The stored record carries an email that does not pass the format check."""

    def __init__(self, username: str, email: str):
        super().__init__("invalid email", username=username)
        self.email = email
