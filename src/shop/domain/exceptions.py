"""Domain-level exceptions.

Catalog operations never raise: they report failure through their return
value. These exceptions cover input that enters the system from outside
(seed files) so the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Incoming data does not describe a well-formed product."""
