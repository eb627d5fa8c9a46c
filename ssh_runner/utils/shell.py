"""Shell quoting helpers for ``sh -c`` scripts."""


def single_quote(value: str, escape: bool = False) -> str:
    """Wrap a value in single quotes for a POSIX shell script.

    Args:
        value: Text to quote
        escape: Rewrite embedded single quotes as ``'\\''`` so the value
            cannot terminate the quoted string early

    Returns:
        The quoted value
    """
    if escape:
        # shlex.quote skips quoting safe values; scripts here are always quoted
        value = value.replace("'", "'\\''")
    return f"'{value}'"
