import logging
import sys

import click

from mython.lexer import Lexer, LexerConfig, LexerError, Token


@click.command()
@click.argument("filename", type=click.Path(dir_okay=False, allow_dash=True), default="-")
@click.option("--strict", is_flag=True, help="Fail on malformed input instead of warning.")
@click.option("--int-bits", type=click.IntRange(min=2), default=32, show_default=True,
              help="Width of the signed integer Number literals wrap to.")
@click.option("--locations", is_flag=True, help="Append line:column to each token.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def main(filename: str, strict: bool, int_bits: int, locations: bool, verbose: bool):
    """Print the tokens of a Mython source FILE, one per line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    config = LexerConfig(
        strict=strict,
        int_bits=int_bits,
        filename="<stdin>" if filename == "-" else filename,
    )
    try:
        with click.open_file(filename, "r", encoding="utf-8") as stream:
            lexer = Lexer(stream, config)
    except LexerError as exc:
        click.echo(str(exc), err=True, nl=False)
        sys.exit(1)

    for token in lexer.tokens:
        click.echo(_render(token, locations))


def _render(token: Token, locations: bool) -> str:
    # Payloads may hold newlines or tabs; keep one token per output line
    text = str(token).replace("\n", "\\n").replace("\t", "\\t")
    if locations and token.location is not None:
        return f"{text} {token.location.line}:{token.location.column}"
    return text


if __name__ == "__main__":
    main()
