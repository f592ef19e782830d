import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import Generator, GeneratorConfig, GeneratorError, OutputMode


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--output-dir", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.option("--output-file", default=None, type=str, help="Name of the generated module")
@click.option("--shared-types", is_flag=True, default=False, help="Collapse structurally identical types")
@click.option("--operation", "operations", multiple=True, help="Only generate this operation (repeatable)")
@click.option("--class-prefix", default=None, type=str)
@click.option("--class-suffix", default=None, type=str)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing output module")
@click.option("--no-copy-schema", is_flag=True, default=False, help="Do not copy the WSDL next to the output")
@click.option("--parse-only", is_flag=True, default=False, help="Print the definition as JSON instead of writing files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("inputs", nargs=-1, type=str)
def wsdl_to_code(
    config,
    output_dir,
    output_file,
    shared_types,
    operations,
    class_prefix,
    class_suffix,
    force,
    no_copy_schema,
    parse_only,
    verbose,
    inputs,
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # Command line values override the config file
    if inputs:
        config.input_file = list(inputs)
    if output_dir is not None:
        config.output_dir = output_dir
    if output_file is not None:
        config.output_file = output_file
    if shared_types:
        config.shared_types = True
    if operations:
        config.operation_names = list(operations)
    if class_prefix is not None:
        config.class_prefix = class_prefix
    if class_suffix is not None:
        config.class_suffix = class_suffix
    if force:
        config.output.mode = OutputMode.FORCE
    if no_copy_schema:
        config.copy_schema = False
    config.generation_comment = reconstruct_command_line(wsdl_to_code)

    generator = Generator()
    try:
        path = generator.generate(config, parse_only=parse_only)
    except (GeneratorError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    if parse_only:
        definition = generator.get_definition()
        click.echo(
            json.dumps(
                {
                    "methods": [method.to_dict() for method in definition["methods"]],
                    "locations": [location.to_dict() for location in definition["locations"]],
                    "service_identifier": definition["service_identifier"],
                },
                indent=2,
            )
        )
    else:
        click.echo(f"Generated {path}")
