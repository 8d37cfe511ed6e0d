"""Box office command line.

Collects ticket choices from a buyer (interactively or from options) and
hands them to PurchaseTicketsUseCase.
"""

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from cinema_ticketing.platform.config.core_setting import settings
from cinema_ticketing.platform.config.di import container
from cinema_ticketing.platform.config.wire_modules import WIRE_MODULES
from cinema_ticketing.platform.exception.exceptions import InvalidPurchaseError
from cinema_ticketing.service.ticketing.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from cinema_ticketing.service.ticketing.domain.enum.ticket_category import TicketCategory
from cinema_ticketing.service.ticketing.domain.price_calculator import (
    TICKET_PRICES,
    occupies_seat,
)
from cinema_ticketing.service.ticketing.domain.value_object.ticket_request import TicketRequest


app = typer.Typer(
    name='cinema-tickets',
    help='Cinema box office - buy ADULT, CHILD and INFANT tickets',
    add_completion=False,
)

console = Console(soft_wrap=True)

# Menu numbering shown to the buyer, 1-based
MENU_OPTIONS: tuple[TicketCategory, ...] = (
    TicketCategory.ADULT,
    TicketCategory.CHILD,
    TicketCategory.INFANT,
)
DONE_KEYWORD = 'done'


def _show_version(value: bool) -> None:
    if value:
        console.print(f'{settings.PROJECT_NAME} {settings.VERSION}', highlight=False)
        raise typer.Exit()


@app.callback()
def wire_dependencies(
    version: bool = typer.Option(
        False,
        '--version',
        '-V',
        callback=_show_version,
        is_eager=True,
        help='Show the version and exit',
    ),
) -> None:
    container.wire(modules=WIRE_MODULES)


def _parse_positive_int(value: str) -> int | None:
    try:
        number = int(value.strip())
    except ValueError:
        return None
    return number if number > 0 else None


def _format_price(category: TicketCategory) -> str:
    return f'{settings.CURRENCY_SYMBOL}{TICKET_PRICES[category]}'


def _show_menu() -> None:
    console.print(f'\nSelect ticket types and quantities (Type "{DONE_KEYWORD}" to finish):')
    for index, category in enumerate(MENU_OPTIONS, start=1):
        console.print(f'{index}. {category} - {_format_price(category)}', highlight=False)


def _collect_ticket_requests() -> list[TicketRequest]:
    ticket_requests: list[TicketRequest] = []
    while True:
        _show_menu()
        answer = typer.prompt(f'Enter ticket type (1, 2, or 3) or "{DONE_KEYWORD}" to finish')
        if answer.strip().lower() == DONE_KEYWORD:
            return ticket_requests

        choice = _parse_positive_int(answer)
        if choice is None or choice > len(MENU_OPTIONS):
            console.print('[yellow]Invalid choice. Please select a valid ticket type.[/yellow]')
            continue

        category = MENU_OPTIONS[choice - 1]
        quantity = _parse_positive_int(
            typer.prompt(f'How many {category} tickets would you like to buy?')
        )
        if quantity is None:
            console.print('[yellow]Please enter a valid number of tickets.[/yellow]')
            continue

        ticket_requests.append(TicketRequest(category, quantity))


def _parse_ticket_option(raw: str) -> TicketRequest:
    category, separator, count = raw.partition('=')
    if not separator:
        raise typer.BadParameter(f'expected CATEGORY=COUNT, got {raw!r}', param_hint='--ticket')
    try:
        return TicketRequest(category.strip().upper(), int(count))
    except ValueError as e:
        raise typer.BadParameter(f'{raw!r}: {e}', param_hint='--ticket') from e


def _submit_purchase(account_id: int, ticket_requests: list[TicketRequest]) -> None:
    use_case = PurchaseTicketsUseCase.depends()
    try:
        use_case.purchase_tickets(account_id=account_id, ticket_requests=ticket_requests)
    except InvalidPurchaseError as e:
        console.print(f'[red]Purchase failed:[/red] {escape(e.message)}')
        raise typer.Exit(1)
    except Exception as e:
        console.print(f'[red]An unexpected error occurred:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    console.print('[green]Ticket purchase successful![/green]')


@app.command()
def buy() -> None:
    """Choose tickets from a menu, then pay and reserve seats."""
    account_id = _parse_positive_int(typer.prompt('Enter your account ID (greater than 0)'))
    if account_id is None:
        console.print('[red]Invalid account ID. Must be greater than 0.[/red]')
        raise typer.Exit(1)

    ticket_requests = _collect_ticket_requests()
    if not ticket_requests:
        console.print('No tickets requested. Exiting...')
        return

    _submit_purchase(account_id, ticket_requests)


@app.command()
def purchase(
    account_id: int = typer.Option(
        ...,
        '--account-id',
        '-a',
        help='Account paying for the tickets',
    ),
    tickets: List[str] = typer.Option(
        ...,
        '--ticket',
        '-t',
        help='CATEGORY=COUNT, e.g. ADULT=2 (repeatable)',
    ),
) -> None:
    """Buy tickets without prompts."""
    ticket_requests = [_parse_ticket_option(raw) for raw in tickets]
    _submit_purchase(account_id, ticket_requests)


@app.command()
def prices() -> None:
    """Show the ticket price list."""
    table = Table(title='Ticket prices')
    table.add_column('Category')
    table.add_column('Price', justify='right')
    table.add_column('Needs a seat')
    for category in MENU_OPTIONS:
        table.add_row(
            category,
            _format_price(category),
            'yes' if occupies_seat(category) else 'no',
        )
    console.print(table)
