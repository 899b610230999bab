"""Terminal message helpers for the MOVIECAT CLI.

Status lines go to stderr so stdout stays reserved for query results. Each
line starts with an emoji glyph, or an ASCII stand-in when stderr cannot
encode the emoji.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on Click's stderr stream.

    The stream is looked up on every call.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" on terminals that cannot encode it."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅", or "[OK]" on terminals that cannot encode it."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌", or "[X]" on terminals that cannot encode it."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Write a bold yellow warning line to stderr.

    Example:
        ``⚠️  This will modify your database.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Write a bold green success line to stderr.

    Example:
        ``✅  Seed loaded (153 statements).``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Write a bold red error line to stderr.

    Example:
        ``❌  Cannot connect to database``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
