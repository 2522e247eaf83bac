"""Main CLI entry point."""

import logging

import click
from lancamentos.cli.error_handling import handle_domain_error
from lancamentos.cli.rendering import echo_notification
from lancamentos.domain.errors import DomainError
from lancamentos.domain.repository import TransactionRepository
from lancamentos.store.factories import DATABASE_URL_ENV, create_record_store

# Import and register all commands at module level
from lancamentos.cli.commands import (
    add,
    view,
    summary,
    transaction,
    export,
)


@click.group()
@click.option(
    "--database-url",
    help=f"SQLAlchemy URL of the record store (overrides {DATABASE_URL_ENV} environment variable)",
    envvar=DATABASE_URL_ENV,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, database_url: str | None, log_level: str):
    """Lançamentos - expense and income ledger.

    Create, edit, filter, mark as paid and delete ledger entries, with
    income/expense totals and CSV export of the filtered list.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    # Connect and load only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            store = create_record_store(database_url=database_url)
        except DomainError as e:
            handle_domain_error(ctx, e)
        store.connect()
        ctx.call_on_close(store.disconnect)

        repository = TransactionRepository(store, notifier=echo_notification)
        try:
            repository.load()
        except DomainError as e:
            handle_domain_error(ctx, e)
        ctx.obj["repository"] = repository


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
transaction.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
