"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the in-memory state of one overlay session and
    the rules for mutating it. They perform no I/O.
    """

    pass
