import asyncio

import click

from cityweather.config import WeatherEnv
from cityweather.exceptions import WeatherLookupError
from cityweather.forecast.views import UnitSystem
from cityweather.report import format_report, get_weather_report
from cityweather.shared.logging_mixin import configure_logging


def display_report(text: str) -> None:
    header, _, body = text.partition("\n")
    click.echo(click.style(header, fg="bright_cyan", bold=True))
    click.echo(body)


def display_error(message: str) -> None:
    click.echo(click.style(f"Error: {message}", fg="bright_red", bold=True), err=True)


@click.command()
@click.argument("city")
@click.option(
    "--units",
    "-u",
    type=click.Choice([unit.value for unit in UnitSystem]),
    default=UnitSystem.METRIC.value,
    show_default=True,
    help="Metric (°C, km/h) or imperial (°F, mph)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the raw report as JSON")
def main(city: str, units: str, as_json: bool):
    """Show the current weather for CITY."""
    if not city.strip():
        display_error("Please enter a city name")
        raise SystemExit(1)

    settings = WeatherEnv()
    configure_logging(settings.cityweather_log_level)

    try:
        report = asyncio.run(get_weather_report(city, units, settings=settings))
    except WeatherLookupError as e:
        display_error(str(e))
        raise SystemExit(1) from e

    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return

    display_report(format_report(report))


if __name__ == "__main__":
    main()
