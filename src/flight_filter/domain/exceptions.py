"""
Domain Exceptions
"""


class InvalidArgumentError(Exception):
    """Missing or invalid argument when building domain objects.

    Also raised from pydantic model validators, so it must not subclass
    ``ValueError``: pydantic would wrap it into ``ValidationError``.
    """
