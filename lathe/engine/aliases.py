"""Alternate task names."""

DEFAULT_ALIASES: dict[str, str] = {
    "--help": "help",
    "-h": "help",
    "-?": "help",
    "-v": "version",
    "--version": "version",
    "überjar": "uberjar",
    "cp": "classpath",
    "int": "interactive",
}


class AliasTable:
    """
    Map short or legacy task names to canonical ones.

    Seeded with the default aliases; plugins and the user init script may
    register more. Entries are never removed.

    Example:
        >>> aliases = AliasTable()
        >>> aliases.resolve("-h")
        'help'
        >>> aliases.resolve("compile")
        'compile'
    """

    def __init__(self, aliases: dict[str, str] | None = None) -> None:
        self._aliases = dict(DEFAULT_ALIASES)
        if aliases:
            self._aliases.update(aliases)

    def register(self, alias: str, task_name: str) -> None:
        self._aliases[alias] = task_name

    def resolve(self, task_name: str) -> str:
        return self._aliases.get(task_name, task_name)

    def __contains__(self, alias: object) -> bool:
        return alias in self._aliases

    def as_dict(self) -> dict[str, str]:
        return dict(self._aliases)
