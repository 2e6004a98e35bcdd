def internal_only(obj):
    """
    Mark a function or class as a deliberately undocumented helper. The
    public API check in the test-suite skips anything carrying this marker.
    """
    obj.__internal_only__ = True
    return obj


def is_internal_only(obj) -> bool:
    """
    Whether ``obj`` was marked with :func:`internal_only`.
    """
    return getattr(obj, "__internal_only__", False)


internal_only(internal_only)
internal_only(is_internal_only)
