"""Main CLI application entry point."""

import json
import logging

import typer
from rich.console import Console
from rich.markup import escape

from selector_builder import __version__
from selector_builder.core.builder import SelectorBuilder, css_selector_builder
from selector_builder.utils.config import ConfigLoader
from selector_builder.utils.exceptions import ConfigurationError, SelectorBuilderError

console = Console(stderr=True)

app = typer.Typer(
    name="selector-builder",
    help="Build and validate CSS complex selectors.",
    no_args_is_help=True,
)

# Step kinds accepted by `build`, mapped to builder methods
STEP_METHODS = {
    "element": SelectorBuilder.element,
    "id": SelectorBuilder.id,
    "class": SelectorBuilder.class_,
    "attr": SelectorBuilder.attr,
    "pseudo-class": SelectorBuilder.pseudo_class,
    "pseudo-element": SelectorBuilder.pseudo_element,
}

COMBINATOR_ALIASES = {
    "descendant": " ",
    "+": "+",
    "~": "~",
    ">": ">",
    " ": " ",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"selector-builder v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """selector-builder - build and validate CSS complex selectors."""
    pass


def parse_steps(steps: list[str]) -> tuple[list[list[tuple[str, str]]], list[str]]:
    """Split command line steps into compound selectors and combinators.

    Args:
        steps: Tokens such as ``element=a``, ``class=icon`` or ``>``.

    Returns:
        A tuple of (compounds, combinators) where ``len(compounds)`` is
        ``len(combinators) + 1``.

    Raises:
        ValueError: If a step is malformed or a combinator is misplaced.
    """
    compounds: list[list[tuple[str, str]]] = [[]]
    combinators: list[str] = []
    for step in steps:
        if step in COMBINATOR_ALIASES:
            if not compounds[-1]:
                raise ValueError(f"Combinator '{step}' must follow a selector")
            combinators.append(COMBINATOR_ALIASES[step])
            compounds.append([])
            continue
        kind, sep, value = step.partition("=")
        if not sep or kind not in STEP_METHODS:
            raise ValueError(
                f"Invalid step '{step}': expected KIND=VALUE with KIND one of "
                f"{', '.join(STEP_METHODS)}, or a combinator"
            )
        compounds[-1].append((kind, value))
    if not compounds[-1]:
        raise ValueError("Selector must not be empty or end with a combinator")
    return compounds, combinators


def build_selector(steps: list[str], strict_combinators: bool = True) -> str:
    """Build a selector string from command line steps.

    Compound parts are built in the order given, so ordering and duplicate
    violations surface exactly as they would in library code.
    """
    compounds, combinators = parse_steps(steps)
    rendered = []
    for parts in compounds:
        builder = css_selector_builder(strict_combinators)
        for kind, value in parts:
            STEP_METHODS[kind](builder, value)
        rendered.append(builder.stringify())

    result = rendered[0]
    for combinator, right in zip(combinators, rendered[1:], strict=True):
        result = (
            css_selector_builder(strict_combinators)
            .combine(result, combinator, right)
            .stringify()
        )
    return result


@app.command(epilog="Example: selector-builder build element=a attr='href$=\".png\"'")
def build(
    steps: list[str] = typer.Argument(
        ...,
        help="Steps like element=div, id=main, class=x, attr=..., "
        "pseudo-class=..., pseudo-element=..., or a combinator "
        "(+, ~, >, descendant)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as a JSON object",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Log every construction step",
    ),
) -> None:
    """Build a CSS selector from a sequence of steps."""
    try:
        config = ConfigLoader.load()
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=2) from e

    logging.basicConfig(level="DEBUG" if verbose else config.log_level)

    try:
        selector = build_selector(steps, config.strict_combinators)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=2) from e
    except SelectorBuilderError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(json.dumps({"selector": selector}))
    else:
        typer.echo(selector)
