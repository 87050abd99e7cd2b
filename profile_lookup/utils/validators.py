"""
Format checks for usernames and stored email addresses.
"""
import re

USERNAME_PATTERN = re.compile(r'[a-z0-9_-]{3,16}')
EMAIL_PATTERN = re.compile(r'[A-Za-z0-9_-]+@[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+)+')


def is_valid_username(username):
    """
    Lowercase letters, digits, underscore and hyphen; 3 to 16 characters.
    """
    if not isinstance(username, str):
        return False
    return USERNAME_PATTERN.fullmatch(username) is not None


def is_valid_email(email):
    """
    A local part and a domain with at least one dot-separated label after it.
    """
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None
