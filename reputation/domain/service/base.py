"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the engine's business rules and talk to storage
    only through repository interfaces.
    """

    pass
