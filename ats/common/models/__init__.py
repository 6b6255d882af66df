from .abstract import TimeStampedModel  # noqa: F401
