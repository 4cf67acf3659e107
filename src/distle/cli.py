from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import LOG_LEVEL_ENV, load_options
from .edit_distance import build_table, table_distance, to_codes, transform_sequence
from .edit_distance import distance as edit_distance
from .feedback import feedback
from .player import DistlePlayer
from .report import format_table, write_json
from .schemas import SuggestResult, TransformResult


app = typer.Typer(
    add_completion=False,
    help="Damerau-style edit distance and Distle candidate filtering.",
    pretty_exceptions_show_locals=False,
)


def _ensure_parent(path: str | Path | None) -> None:
    if not path:
        return
    p = Path(path)
    if p.parent and not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar=LOG_LEVEL_ENV, help="DEBUG|INFO|WARNING|ERROR"
    ),
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level {log_level!r}", param_hint="--log-level")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def distance(
    source: str = typer.Argument(..., help="String to transform."),
    target: str = typer.Argument(..., help="Target string."),
) -> None:
    """
    Print the edit distance between SOURCE and TARGET.
    """
    typer.echo(edit_distance(source, target))


@app.command()
def transforms(
    source: str = typer.Argument(..., help="String to transform."),
    target: str = typer.Argument(..., help="Target string."),
    names: bool = typer.Option(False, "--names", help="Print enum names instead of R/T/I/D codes."),
    show_table: bool = typer.Option(False, "--table", help="Also print the distance table."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON output."),
) -> None:
    """
    Print the canonical top-down transform sequence from SOURCE to TARGET.
    """
    table = build_table(source, target)
    seq = transform_sequence(source, target, table)

    if show_table:
        typer.echo(format_table(source, target, table))
    if names:
        typer.echo(" ".join(t.name for t in seq))
    else:
        typer.echo(" ".join(to_codes(seq)))

    if out_json:
        result = TransformResult(
            source=source,
            target=target,
            distance=table_distance(table),
            transforms=seq,
            table=table if show_table else None,
        )
        _ensure_parent(out_json)
        write_json(result, out_json)


@app.command()
def suggest(
    guess: str = typer.Argument(..., help="The guess that was played."),
    secret: str = typer.Argument(..., help="The hidden word (used to compute feedback)."),
    words: list[str] = typer.Argument(..., help="Candidate words."),
    config: Optional[str] = typer.Option(None, "--config", help="YAML/JSON player options."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON output."),
) -> None:
    """
    Play one round: filter WORDS by the feedback GUESS receives against SECRET.
    """
    if secret not in words:
        raise typer.BadParameter("secret must be one of the candidate words", param_hint="SECRET")
    try:
        options = load_options(config)
    except (FileNotFoundError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e

    fb = feedback(guess, secret)
    player = DistlePlayer(options)
    player.start_new_game(words, max_guesses=2)

    next_guess: Optional[str]
    if guess == secret:
        remaining = [secret]
        next_guess = None
    else:
        player.get_feedback(fb.guess, fb.edit_distance, fb.transforms)
        remaining = player.candidates
        next_guess = player.make_guess()

    typer.echo(f"distance: {fb.edit_distance}")
    typer.echo(f"transforms: {' '.join(to_codes(fb.transforms))}")
    typer.echo(f"remaining ({len(remaining)}): {' '.join(remaining)}")
    if next_guess is not None:
        typer.echo(f"next guess: {next_guess}")

    if out_json:
        result = SuggestResult(
            guess=guess, secret=secret, feedback=fb, remaining=remaining, next_guess=next_guess
        )
        _ensure_parent(out_json)
        write_json(result, out_json)
