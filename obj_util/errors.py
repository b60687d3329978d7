"""Exception types raised by obj-util."""


class ObjUtilError(Exception):
    """Base exception for obj-util errors."""


class ConfigurationError(ObjUtilError):
    """Raised when a required collaborator has not been registered."""
