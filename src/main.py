"""
main.py - Application entry point for the auth widget configurator
-------------------------------------------------------------------

Responsible for:
- loading YAML configuration
- wiring the session (store, event bus, controllers)
- serving the REST API with uvicorn
"""

import sys

# Set UTF-8 encoding for output BEFORE logging (log symbols are non-ASCII)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
import uvicorn
from fastapi import FastAPI

from api.main import create_app
from api.dependencies import set_service_container
from managers import ConfigManager
from models.enums import LogCategory, LogLevel
from services import EventBus
from services.middleware import log_middleware
from services.service_container import ServiceContainer
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def build_services(config_path: str = "config/config.yaml") -> ServiceContainer:
    """Load configuration and wire a fresh configurator session"""
    config_manager = ConfigManager(config_path=config_path)
    config_manager.load()

    event_bus = EventBus()
    event_bus.add_middleware(log_middleware)

    services = ServiceContainer.build(config_manager, event_bus)
    log.info(
        "Session ready",
        primary_color=services.config_store.current().primary_color,
        presets=len(services.color_manager.presets)
    )
    return services


async def run_api_server(app: FastAPI, host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run FastAPI/Uvicorn server in asyncio event loop."""
    config = uvicorn.Config(
        app=app,
        host=host,
        port=port,
        loop="asyncio",
        log_level="info",
        access_log=False,
    )

    server = uvicorn.Server(config)

    log.info(f"🌐 Starting API server on {host}:{port}")
    await server.serve()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Auth widget configurator API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Main config file, relative to src/ (default: config/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=[level.name for level in LogLevel],
        help="Minimum log level (default: INFO)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in log output")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    configure_logger(EnumHelper.from_value(LogLevel, args.log_level), use_colors=not args.no_color)

    services = build_services(args.config)
    set_service_container(services)

    app = create_app()
    try:
        asyncio.run(run_api_server(app, host=args.host, port=args.port))
    except KeyboardInterrupt:
        log.info("Shutting down")


if __name__ == "__main__":
    main()
