import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from swagmodel.codegen.collector import ModelCollector
from swagmodel.codegen.schema_loader import SchemaLoader
from swagmodel.config import DocumentConfig, SwagModelConfig, get_config
from swagmodel.exceptions import SwagModelError

console = Console()
app = typer.Typer(
    name='swagmodel',
    help='Resolve Swagger 2.0 schemas into renderable type models',
    no_args_is_help=True,
)

SourceArgument = Annotated[
    str | None,
    typer.Argument(help='Path or URL of a Swagger 2.0 document'),
]
ConfigOption = Annotated[
    str | None,
    typer.Option('--config', '-c', help='Path to configuration file (YAML or JSON)'),
]


def _documents(source: str | None, config: SwagModelConfig) -> list[DocumentConfig]:
    if source:
        return [DocumentConfig(source=source)]
    if not config.documents:
        raise typer.BadParameter(
            'no SOURCE given and no documents configured', param_hint='SOURCE'
        )
    return config.documents


def _collectors(source: str | None, config_path: str | None):
    config = get_config(config_path)
    for document_config in _documents(source, config):
        loader = SchemaLoader(base=document_config.base_url)
        document = loader.load(document_config.source)
        yield document_config, ModelCollector(document, config.resolver)


@app.command()
def models(
    source: SourceArgument = None,
    config: ConfigOption = None,
    as_json: Annotated[
        bool, typer.Option('--json', help='Print the models as JSON')
    ] = False,
) -> None:
    """Resolve every definition of a document and list the models.

    Examples:
        swagmodel models ./swagger.yaml
        swagmodel models https://petstore.swagger.io/v2/swagger.json --json
    """
    try:
        for document_config, collector in _collectors(source, config):
            resolved = collector.collect_models()

            if as_json:
                typer.echo(json.dumps([m.to_dict() for m in resolved], indent=2))
                continue

            table = Table(title=document_config.source)
            table.add_column('Name')
            table.add_column('Kind')
            table.add_column('Type')
            table.add_column('Imports')
            for model in resolved:
                table.add_row(
                    model.name,
                    model.kind,
                    model.rendered_type,
                    ', '.join(dict.fromkeys(model.imports)),
                )
            console.print(table)

    except SwagModelError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def operations(
    source: SourceArgument = None,
    config: ConfigOption = None,
) -> None:
    """List the generated method name of every operation in a document.

    Examples:
        swagmodel operations ./swagger.yaml
        swagmodel operations ./swagger.yaml -c swagmodel.yaml
    """
    try:
        for document_config, collector in _collectors(source, config):
            table = Table(title=document_config.source)
            table.add_column('Method')
            table.add_column('Path')
            table.add_column('Name')
            for operation in collector.collect_operations():
                table.add_row(operation.method.upper(), operation.path, operation.name)
            console.print(table)

    except SwagModelError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of swagmodel."""
    from swagmodel import __version__

    console.print(f'swagmodel version: {__version__}')


if __name__ == '__main__':
    app()
