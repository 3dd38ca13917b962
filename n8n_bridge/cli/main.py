"""CLI entrypoint for n8n-bridge — typer app with `ask`, `chat` and `weather` commands."""

import asyncio
import logging
import sys
from pathlib import Path

import httpx
import structlog
import typer

from n8n_bridge.agent.application.bridge import AgentBridge
from n8n_bridge.agent.domain.result import AgentResult
from n8n_bridge.agent.infrastructure.observer import StructlogAgentObserver
from n8n_bridge.config.domain.config import BotConfig
from n8n_bridge.config.infrastructure.observer import StructlogConfigObserver
from n8n_bridge.config.infrastructure.source import ConfigSource
from n8n_bridge.config.infrastructure.yaml_loader import YamlConfigLoader
from n8n_bridge.core.errors import BridgeError
from n8n_bridge.transport.infrastructure.httpx_transport import HttpxTransport
from n8n_bridge.transport.infrastructure.observer import StructlogTransportObserver
from n8n_bridge.weather.application.service import WeatherService
from n8n_bridge.weather.domain.report import WeatherResult
from n8n_bridge.weather.infrastructure.observer import StructlogWeatherObserver

app = typer.Typer(add_completion=False)

_EXIT_WORDS = {"exit", "quit"}


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=transport, follow_redirects=True)


def _config_source(config_path: Path | None) -> ConfigSource:
    return ConfigSource(
        path=config_path, loader=YamlConfigLoader(observer=StructlogConfigObserver())
    )


def _snapshot(source: ConfigSource) -> BotConfig:
    try:
        return source.current()
    except BridgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


async def _ask(prompt: str, user_id: str, config: BotConfig) -> AgentResult:
    async with _http_client() as client:
        bridge = AgentBridge(
            transport=HttpxTransport(client=client, observer=StructlogTransportObserver()),
            observer=StructlogAgentObserver(),
        )
        return await bridge.ask(prompt=prompt, user_id=user_id, config=config.agent)


async def _weather(city: str, config: BotConfig) -> WeatherResult:
    async with _http_client() as client:
        service = WeatherService(
            transport=HttpxTransport(client=client, observer=StructlogTransportObserver()),
            observer=StructlogWeatherObserver(),
        )
        return await service.get_weather(city=city, config=config.weather)


_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to a YAML config file; environment variables alone when omitted",
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log debug events")


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Prompt to send to the n8n AI agent"),
    user_id: str = typer.Option("cli", "--user-id", "-u", help="Caller identity"),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Send one prompt to the n8n AI agent and print the reply."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    config = _snapshot(_config_source(config_path))

    result = asyncio.run(_ask(prompt=prompt, user_id=user_id, config=config))
    typer.echo(result.message)
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def chat(
    user_id: str = typer.Option("cli", "--user-id", "-u", help="Caller identity"),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Prompt repeatedly until 'exit'. The config is re-read before every prompt."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    source = _config_source(config_path)

    while True:
        try:
            prompt = typer.prompt("you")
        except typer.Abort:
            break
        if prompt.strip().lower() in _EXIT_WORDS:
            break
        config = _snapshot(source)
        result = asyncio.run(_ask(prompt=prompt, user_id=user_id, config=config))
        typer.echo(f"agent: {result.message}")


@app.command()
def weather(
    city: str = typer.Argument(..., help="City to look up"),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the current weather for a city."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    config = _snapshot(_config_source(config_path))

    result = asyncio.run(_weather(city=city, config=config))
    typer.echo(result.message)
    if not result.success:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
