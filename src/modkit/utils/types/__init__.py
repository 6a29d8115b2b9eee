from .fields import NonEmptyString

__all__ = ["NonEmptyString"]
