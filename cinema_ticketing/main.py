from cinema_ticketing.service.ticketing.driving_adapter.cli.ticket_cli import app


def main() -> None:
    app()


if __name__ == '__main__':
    main()
