"""Base class for domain services."""


class Service:
    """Base for domain services.

    Services hold the business rules that span entities, such as scoring a
    team against an opportunity or moving an invitation through its states.
    """

    pass
