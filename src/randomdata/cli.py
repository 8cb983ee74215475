"""Typer-based command line interface for random data generation.

Each command prints one generated value to stdout.  Global options select a
configuration file and an optional seed; they apply to every command.

Exit codes
----------
0 success
4 configuration error
5 invalid arguments (bounds, counts or alphabet)
"""

from __future__ import annotations

import os
import sys
from datetime import datetime as _datetime
from pathlib import Path
from typing import Callable, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config
from .generator import RandomData
from .strings import ALPHA, ALPHANUMERIC, GENERAL
from .utils.errors import RandomDataError
from .utils.logging import configure, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="randomdata",
    help="Generate random values and filler text. Use 'randomdata COMMAND --help' for options.",
)

_ALPHABETS = {"general": GENERAL, "alpha": ALPHA, "alphanumeric": ALPHANUMERIC}


class _State:
    config_path: Path | None = None
    seed: int | None = None


_state = _State()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _generator() -> RandomData:
    try:
        cfg = load_config(_state.config_path)
    except (OSError, ValidationError, yaml.YAMLError) as exc:
        _safe_exit(4, f"configuration error: {exc}")
    if _state.seed is not None:
        cfg = cfg.model_copy(update={"seed": _state.seed})
    log.debug("using seed %s", cfg.seed)
    return RandomData(cfg)


def _emit(produce: Callable[[RandomData], object]) -> None:
    gen = _generator()
    try:
        value = produce(gen)
    except RandomDataError as exc:
        _safe_exit(5, f"error: {exc}")
    typer.echo(value)


@app.callback()
def main(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages to stderr"),
) -> None:
    """Entry point for the randomdata command group."""

    configure(verbose)
    _state.config_path = config_path
    _state.seed = seed


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("int")
def int_cmd(
    min_value: int = typer.Option(-(2**31), "--min"),
    max_value: int = typer.Option(2**31 - 1, "--max"),
) -> None:
    """Print an integer in [MIN, MAX]."""

    _emit(lambda g: g.integer(min_value, max_value))


@app.command("long")
def long_cmd(
    min_value: int = typer.Option(-(2**63), "--min"),
    max_value: int = typer.Option(2**63 - 1, "--max"),
) -> None:
    """Print a 64-bit integer in [MIN, MAX)."""

    _emit(lambda g: g.wide_integer(min_value, max_value))


@app.command("float")
def float_cmd(
    min_value: Optional[float] = typer.Option(None, "--min"),
    max_value: Optional[float] = typer.Option(None, "--max"),
) -> None:
    """Print a float in [MIN, MAX]."""

    _emit(lambda g: g.real(min_value, max_value))


@app.command("bool")
def bool_cmd(chance: int = typer.Option(50, "--chance", help="Percent chance of true")) -> None:
    """Print true or false."""

    _emit(lambda g: str(g.boolean(chance)).lower())


@app.command("datetime")
def datetime_cmd(
    start: Optional[_datetime] = typer.Option(None, "--start"),  # noqa: B008
    end: Optional[_datetime] = typer.Option(None, "--end"),  # noqa: B008
) -> None:
    """Print an ISO-8601 timestamp between START and END."""

    _emit(lambda g: g.datetime(start, end).isoformat())


@app.command("string")
def string_cmd(
    min_length: Optional[int] = typer.Option(None, "--min-length"),
    max_length: Optional[int] = typer.Option(None, "--max-length"),
    alphabet: str = typer.Option(
        "general", "--alphabet", help="Preset name (general, alpha, alphanumeric) or literal pool"
    ),
) -> None:
    """Print a random string."""

    pool = _ALPHABETS.get(alphabet, alphabet)
    _emit(lambda g: g.string(min_length, max_length, pool))


@app.command("words")
def words_cmd(
    min_words: Optional[int] = typer.Option(None, "--min-words"),
    max_words: Optional[int] = typer.Option(None, "--max-words"),
    title_all: bool = typer.Option(True, "--title/--no-title", help="Title-case every word"),
) -> None:
    """Print a phrase of lexicon words."""

    _emit(lambda g: g.words(min_words, max_words, title_all=title_all))


@app.command("sentence")
def sentence_cmd(
    min_words: Optional[int] = typer.Option(None, "--min-words"),
    max_words: Optional[int] = typer.Option(None, "--max-words"),
) -> None:
    """Print a sentence."""

    _emit(lambda g: g.sentence(min_words, max_words))


@app.command("paragraphs")
def paragraphs_cmd(
    count: Optional[int] = typer.Option(None, "--count"),
    min_sentences: Optional[int] = typer.Option(None, "--min-sentences"),
    max_sentences: Optional[int] = typer.Option(None, "--max-sentences"),
    min_sentence_words: Optional[int] = typer.Option(None, "--min-sentence-words"),
    max_sentence_words: Optional[int] = typer.Option(None, "--max-sentence-words"),
    html: bool = typer.Option(False, "--html", help="Wrap paragraphs in <p> tags"),
) -> None:
    """Print filler paragraphs."""

    _emit(
        lambda g: g.paragraphs(
            count,
            min_sentences,
            max_sentences,
            min_sentence_words,
            max_sentence_words,
            html=html,
        )
    )


@app.command("version")
def version_cmd(
    min_version: Optional[str] = typer.Option(None, "--min"),
    max_version: Optional[str] = typer.Option(None, "--max"),
) -> None:
    """Print a four-part version string."""

    _emit(lambda g: g.version(min_version, max_version))


@app.command("ip")
def ip_cmd() -> None:
    """Print an IPv4 address."""

    _emit(lambda g: g.ipv4_address())


@app.command("coordinate")
def coordinate_cmd() -> None:
    """Print a "lat,lng" pair."""

    _emit(lambda g: g.coordinate())


if __name__ == "__main__":  # pragma: no cover
    app()
