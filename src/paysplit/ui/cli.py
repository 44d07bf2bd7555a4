from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
import typer

from paysplit.adapters.json_loader import OrdersJSONLoader, PaymentMethodsJSONLoader
from paysplit.config import (
    configure_logging,
    load_optimizer_config_from_env,
    with_log_level,
)
from paysplit.core.entities import build_payment_method_map
from paysplit.core.selector import find_optimal_assignments
from paysplit.core.usage import UsageLedger
from paysplit.errors import PaySplitError
from paysplit.ui.reporter import ResultReporter

# Load environment variables from .env
load_dotenv()

app = typer.Typer(
    help="paysplit — choose payment methods for a batch of orders.",
    no_args_is_help=True,
)


@app.callback()
def main_callback() -> None:
    """Pay each order with the cheapest admissible mix of points and cards."""


@app.command("optimize")
def optimize(
    orders_path: Path = typer.Argument(  # noqa: B008
        ..., help="JSON array of orders", metavar="ORDERS_JSON"
    ),
    payment_methods_path: Path = typer.Argument(  # noqa: B008
        ..., help="JSON array of payment methods", metavar="PAYMENT_METHODS_JSON"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override PAYSPLIT_LOG_LEVEL for this run"
    ),
) -> None:
    """
    Assign a payment method to every order and print method usage.

    Prints one block per order with the amounts charged to points and cards,
    followed by the total used per payment method. Prints a single message
    when no assignment fits the limits.
    """
    try:
        config = with_log_level(load_optimizer_config_from_env(), log_level)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1) from None
    configure_logging(config)

    try:
        orders = OrdersJSONLoader(orders_path).load()
        payment_methods = PaymentMethodsJSONLoader(payment_methods_path).load()
    except PaySplitError as e:
        typer.echo(f"Error loading input: {e}", err=True)
        raise typer.Exit(1) from None

    reporter = ResultReporter()
    reporter.loaded(len(orders), len(payment_methods))

    method_map = build_payment_method_map(payment_methods)
    ledger = UsageLedger(payment_methods)

    try:
        assignments = find_optimal_assignments(
            orders, method_map, max_orders=config.max_orders
        )
        reporter.process_results(orders, assignments, ledger)
    except PaySplitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def main() -> None:
    app()


if __name__ == "__main__":
    main()
