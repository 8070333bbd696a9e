import click
from pydantic import ValidationError

from warehouse.config import get_settings
from warehouse.infrastructure.cli.inventory_commands import (
    inventory_add_electronic,
    inventory_add_grocery,
    inventory_demo,
    inventory_list,
    inventory_remove,
    inventory_restock,
    inventory_seed,
    inventory_set_quantity,
)
from warehouse.infrastructure.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Warehouse — electronics and grocery inventory"""
    try:
        settings = get_settings()
    except ValidationError as exc:
        fields = ", ".join(
            "WAREHOUSE_" + "_".join(str(part) for part in err["loc"]).upper()
            for err in exc.errors()
        )
        raise click.UsageError(f"Invalid configuration in {fields}")
    configure_logging(settings)


# Register subcommands
cli.add_command(inventory_add_electronic)
cli.add_command(inventory_add_grocery)
cli.add_command(inventory_demo)
cli.add_command(inventory_list)
cli.add_command(inventory_remove)
cli.add_command(inventory_restock)
cli.add_command(inventory_seed)
cli.add_command(inventory_set_quantity)
