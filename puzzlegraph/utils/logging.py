from puzzlegraph.utils.documentation import internal_only


@internal_only
def log(*args, **kwargs):
    """
    Like print, but does not cause the no-prints test to complain. Only used
    for ``verbose`` diagnostics.
    """
    print(*args, **kwargs)
