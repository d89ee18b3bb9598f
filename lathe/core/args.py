"""Splitting a command line into per-task argument groups."""

ARG_SEPARATOR = ","


def make_groups(args: list[str]) -> list[list[str]]:
    """
    Split args into groups, closing a group at each trailing separator.

    Example:
        >>> make_groups(["foo,", "bar", "baz,"])
        [['foo'], ['bar', 'baz'], []]
    """
    groups: list[list[str]] = [[]]
    for arg in args:
        if arg.endswith(ARG_SEPARATOR):
            groups[-1].append(arg[: -len(ARG_SEPARATOR)])
            groups.append([])
        else:
            groups[-1].append(arg)
    return groups
