"""Command-line interface for SimpleBayes.

Provides ``train``, ``classify``, and ``info`` commands operating on a
JSON model file, with rich terminal output using the ``click`` and ``rich``
libraries.

Usage::

    simple-bayes train fruit.json apple "red sweet"
    simple-bayes train fruit.json apple "round" --weight 2
    simple-bayes classify fruit.json "sweet and round"
    simple-bayes info fruit.json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .classifier import SimpleBayes
from .config import ClassifierConfig, load_config
from .exceptions import SimpleBayesError

console = Console()


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/] {error}")
    sys.exit(1)


def _load_model(model: Path, config: Optional[ClassifierConfig]) -> SimpleBayes:
    """Load ``model`` if it exists, otherwise start an empty classifier."""
    if model.exists():
        return SimpleBayes.load(model, config=config)
    return SimpleBayes(config=config)


@click.group()
@click.version_option(package_name="simple-bayes")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, path_type=Path),
              default=None, help="YAML file with classifier defaults.")
@click.option("--verbose", "-v", is_flag=True, help="Log training and scoring details.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """📊 SimpleBayes — weighted Naive-Bayes text classification.

    Train categories from text and classify new documents against them.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    config = None
    if config_path:
        try:
            config = load_config(config_path)
        except SimpleBayesError as e:
            _fail(e)
    ctx.obj = config


@main.command()
@click.argument("model", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("category")
@click.argument("text", required=False)
@click.option("--file", "-f", "text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="Read training text from a file.")
@click.option("--weight", "-w", type=float, default=None,
              help="Multiplier for this text's token counts.")
@click.pass_obj
def train(
    config: Optional[ClassifierConfig],
    model: Path,
    category: str,
    text: str | None,
    text_file: Path | None,
    weight: float | None,
) -> None:
    """Train CATEGORY on TEXT and save the model.

    The model file is created if it does not exist yet.

    Example: simple-bayes train fruit.json apple "red sweet" --weight 2
    """
    if text_file is not None:
        text = text_file.read_text(encoding="utf-8")
    if text is None:
        raise click.UsageError("Provide TEXT or --file.")

    try:
        bayes = _load_model(model, config)
        bayes.train(category, text, weight=weight)
        bayes.save(model)
    except (SimpleBayesError, OSError, ValueError) as e:
        _fail(e)

    corpus = bayes.corpus
    console.print(
        f"Trained [cyan]{category}[/] "
        f"({corpus.categories[category].trainings} trainings, "
        f"{len(corpus.categories)} categories) → [dim]{model}[/]"
    )


@main.command()
@click.argument("model", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("text")
@click.option("--normalize/--no-normalize", default=None,
              help="Use min-max normalization instead of TF-IDF weighting.")
@click.option("--top", "-n", type=click.IntRange(min=1), default=None,
              help="Show only the best N categories.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def classify(
    config: Optional[ClassifierConfig],
    model: Path,
    text: str,
    normalize: bool | None,
    top: int | None,
    output: str,
) -> None:
    """Score TEXT against every category in MODEL.

    Example: simple-bayes classify fruit.json "sweet and round"
    """
    try:
        bayes = SimpleBayes.load(model, config=config)
        scores = bayes.classify(text, normalize=normalize, top=top)
    except (SimpleBayesError, OSError, ValueError) as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(scores, indent=2))
        return

    table = Table(title=f"Scores — {model.name}")
    table.add_column("#", justify="right", width=4)
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")

    for i, (label, value) in enumerate(scores.items(), 1):
        style = "bold green" if i == 1 else ""
        table.add_row(str(i), label, f"[{style}]{value:.6f}[/]" if style else f"{value:.6f}")

    console.print(table)


@main.command()
@click.argument("model", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def info(config: Optional[ClassifierConfig], model: Path) -> None:
    """Show the categories stored in MODEL."""
    try:
        bayes = SimpleBayes.load(model, config=config)
    except (SimpleBayesError, OSError, ValueError) as e:
        _fail(e)

    corpus = bayes.corpus
    console.print(Panel(
        f"Categories: {len(corpus.categories)} | "
        f"Trainings: {corpus.trainings} | "
        f"Tokens per training: {corpus.tokens_per_training:.2f}",
        title=f"📊 {model.name}",
        border_style="blue",
    ))

    if not corpus.categories:
        return

    table = Table(show_lines=False)
    table.add_column("Category", style="cyan")
    table.add_column("Trainings", justify="right")
    table.add_column("Tokens", justify="right")
    table.add_column("Mass", justify="right")

    for label, category in corpus.categories.items():
        table.add_row(
            label,
            str(category.trainings),
            str(len(category.tokens)),
            f"{sum(category.tokens.values()):.2f}",
        )

    console.print(table)


if __name__ == "__main__":
    main()
