from pathlib import Path
from typing import TYPE_CHECKING, Optional

from click import Choice, group, option
from click import Path as ClickPath
from litestar.cli._utils import LitestarGroup  # pyright: ignore[reportPrivateImportUsage]

from litestar_typegen.codegen import GeneratorStyle

if TYPE_CHECKING:
    from litestar import Litestar

    from litestar_typegen.config import TypeGenConfig


@group(cls=LitestarGroup, name="types")
def typegen_group() -> None:
    """Manage TypeScript type generation."""


def _get_config(app: "Litestar") -> "TypeGenConfig":
    from litestar_typegen.plugin import TypeGenPlugin

    return app.plugins.get(TypeGenPlugin).config


@typegen_group.command(
    name="generate",
    help="Generate TypeScript declarations from the extracted type model.",
)
@option(
    "--output",
    help="Output file path. Uses TypeGenConfig.output if not provided.",
    type=ClickPath(dir_okay=False, path_type=Path),
    default=None,
    show_default=False,
)
@option(
    "--only-used",
    help="Only emit types referenced by the API routes.",
    type=bool,
    default=False,
    is_flag=True,
)
@option(
    "--style",
    help="Client generator style. Styles that need no types skip generation.",
    type=Choice([s.value for s in GeneratorStyle]),
    default=None,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
def generate_types(
    app: "Litestar",
    output: "Optional[Path]",
    only_used: "bool",
    style: "Optional[str]",
    verbose: "bool",
) -> None:
    """Generate TypeScript declarations.

    Args:
        app: The Litestar application instance.
        output: The path to the output file.
        only_used: Restrict output to types referenced by routes.
        style: Client generator style overriding the configured one.
        verbose: Whether to enable verbose output.

    Raises:
        LitestarCLIException: If the model cannot be loaded or the file cannot be written.
    """
    from dataclasses import replace

    from litestar.cli._utils import LitestarCLIException, console  # pyright: ignore[reportPrivateImportUsage]

    from litestar_typegen.codegen import export_from_config
    from litestar_typegen.exceptions import TypeGenError

    if verbose:
        app.debug = True

    config = _get_config(app)
    overrides: dict[str, object] = {}
    if output is not None:
        overrides["output"] = output
    if only_used:
        overrides["only_used_types"] = True
    if style is not None:
        overrides["generator_style"] = style
    if overrides:
        config = replace(config, **overrides)  # type: ignore[arg-type]

    console.rule(f"[yellow]Generating TypeScript types to {config.output}[/]", align="left")
    try:
        result = export_from_config(config)
    except TypeGenError as e:
        msg = f"Type generation failed: {e!s}"
        raise LitestarCLIException(msg) from e

    if result.skipped:
        console.print(f"[yellow]Generator style {config.generator_style!r} needs no TypeScript types[/]")
        return
    for path in result.exported_files:
        console.print(f"[green]✓ Types exported to {path}[/]")
    for path in result.unchanged_files:
        console.print(f"[dim]  {path} unchanged[/]")
    console.print(f"[dim]  {len(result.type_names)} types emitted[/]")
    if verbose and result.type_names:
        console.print(f"[dim]  {', '.join(result.type_names)}[/]")


@typegen_group.command(
    name="used-types",
    help="List the types referenced by the API routes.",
)
@option("--json", "as_json", type=bool, help="Print the names as a JSON array.", default=False, is_flag=True)
def used_types(app: "Litestar", as_json: "bool") -> None:
    """Print the used-type set computed from the configured routes.

    Args:
        app: The Litestar application instance.
        as_json: Print a JSON array instead of one name per line.

    Raises:
        LitestarCLIException: If the model or routes cannot be loaded.
    """
    import msgspec
    from litestar.cli._utils import LitestarCLIException, console  # pyright: ignore[reportPrivateImportUsage]

    from litestar_typegen.codegen import collect_used_types, resolve_definitions, resolve_routes
    from litestar_typegen.exceptions import TypeGenError

    config = _get_config(app)
    try:
        names = collect_used_types(resolve_routes(config), resolve_definitions(config))
    except TypeGenError as e:
        msg = f"Could not collect used types: {e!s}"
        raise LitestarCLIException(msg) from e

    if as_json:
        console.print_json(msgspec.json.encode(names).decode("utf-8"))
        return
    for name in names:
        console.print(name)
