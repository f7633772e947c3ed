"""Terminal message helpers for the SHELFWISE CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Messages write to stderr so stdout stays machine-readable (``--json``).
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call, so a redirected stderr is honored.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, otherwise "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, otherwise "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Using rule book 2026-draft from rules.toml.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Shipment accepted.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Shipment rejected.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
