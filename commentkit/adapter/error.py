"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class EmailDeliveryError(AdapterError):
    """The e-mail provider did not accept a message."""

    pass
