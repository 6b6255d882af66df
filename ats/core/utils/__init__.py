from .common_utils import nested_getattr  # noqa: F401
