"""Entry point to the application as a Typer CLI."""

import typer
from loguru import logger
from typer import Typer

from src.configuration import config

app = Typer(no_args_is_help=True)


@app.command("tabulate")
def tabulate(
    strings: list[str] = typer.Argument(..., help="Corpus strings to be processed."),
    length: int = typer.Option(
        config.ngram_length, "--length", "-n", help="Length of the n-grams."
    ),
    re_adjust: bool = typer.Option(
        config.re_adjust, help="Score n-grams absent from the corpus as the rarest."
    ),
    mode: str = typer.Option(
        config.adjustment_mode, help="Either `unobserved` or `zero_score`."
    ),
    top: int = typer.Option(config.report_top, help="A number of n-grams to show."),
) -> None:
    """Compute n-gram statistics of the given strings and show extreme n-grams."""
    from src.scoring.ngram_values import ngram_values

    if mode not in {"unobserved", "zero_score"}:
        raise typer.BadParameter(f"Unknown adjustment mode `{mode}`.")

    try:
        scores = ngram_values(strings, length, re_adjust, mode=mode)  # pyright: ignore[reportArgumentType]
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    observed = sorted(
        scores.observed().items(), key=lambda item: (item[1].idf, item[0])
    )
    logger.info(
        f"Observed {len(observed)} of {len(scores)} {length}-grams "
        f"in {len(strings)} strings."
    )

    typer.echo("Rarest observed n-grams:")
    for ngram, score in reversed(observed[-top:]):
        typer.echo(
            f"  {ngram}\t{score.string_frequency}\t{score.total_frequency}\t"
            f"{score.idf:.4f}"
        )
    typer.echo("Most common observed n-grams:")
    for ngram, score in observed[:top]:
        typer.echo(
            f"  {ngram}\t{score.string_frequency}\t{score.total_frequency}\t"
            f"{score.idf:.4f}"
        )
    if re_adjust:
        unobserved = next(
            (score for score in scores.values() if not score.observed), None
        )
        if unobserved is not None:
            typer.echo(f"IDF of unseen n-grams: {unobserved.idf:.4f}")


@app.command("universe")
def universe(
    length: int = typer.Option(
        config.ngram_length, "--length", "-n", help="Length of the n-grams."
    ),
    head: int = typer.Option(5, help="A number of leading n-grams to show."),
) -> None:
    """Show the size and the first entries of the n-gram universe."""
    from src.scoring.universe import all_ngrams

    try:
        ngrams = all_ngrams(length)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    typer.echo(f"{len(ngrams)} n-grams of length {length}")
    for ngram in ngrams[:head]:
        typer.echo(f"  {ngram}")


if __name__ == "__main__":
    app()
