"""CLI entry point for the weather relay and dashboard."""

import argparse
import asyncio
import json
import logging

from dotenv import load_dotenv

from weatherapp.config.defaults import DEFAULT_CONFIG_PATH
from weatherapp.config.loader import load_config
from weatherapp.config.schema import AppConfig
from weatherapp.dashboard.controller import DashboardController
from weatherapp.dashboard.formatters import format_dashboard_json, format_dashboard_text
from weatherapp.dashboard.presentation import build_view
from weatherapp.dashboard.relay_client import RelayClient
from weatherapp.dashboard.state import initial_state
from weatherapp.models.common import parse_unit

HELP_TEXT = "Commands: search <location> | unit F|C | expand | refresh | quit"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Weather relay service and terminal dashboard",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the relay service")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # show
    show_p = sub.add_parser("show", help="Fetch once and print the dashboard")
    show_p.add_argument("--location", default=None)
    show_p.add_argument("--unit", default=None, help="F or C")
    show_p.add_argument("--expanded", action="store_true")
    show_p.add_argument("--format", choices=["text", "json"], default="text")

    # interactive
    sub.add_parser("interactive", help="Interactive terminal dashboard")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    load_dotenv()
    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "show":
        return _cmd_show(config, args)
    elif args.command == "interactive":
        return asyncio.run(_interactive(config))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _controller(config: AppConfig, location: str | None = None, unit: str | None = None) -> DashboardController:
    relay = RelayClient(config.dashboard.relay_url, timeout=config.dashboard.timeout)
    state = initial_state(
        location or config.dashboard.default_location,
        unit or config.dashboard.default_unit,
    )
    return DashboardController(relay, state)


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from weatherapp.relay.app import create_app

    app = create_app(config)
    uvicorn.run(
        app,
        host=args.host or config.relay.host,
        port=args.port or config.relay.port,
    )
    return 0


def _cmd_show(config: AppConfig, args) -> int:
    try:
        unit = parse_unit(args.unit) if args.unit else None
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    controller = _controller(config, args.location, unit)
    if args.expanded:
        controller.toggle_expanded()
    state = asyncio.run(controller.start())

    if args.format == "json":
        if state.payload is None:
            print(f"Error: {state.error}")
            return 1
        print(format_dashboard_json(build_view(state.payload, state.unit, state.is_expanded)))
    else:
        print(format_dashboard_text(state))
    return 0 if state.error is None else 1


async def _interactive(config: AppConfig) -> int:
    controller = _controller(config)
    print(HELP_TEXT)
    print(format_dashboard_text(await controller.start()))

    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except EOFError:
            return 0
        command, _, rest = line.strip().partition(" ")
        command = command.lower()

        if command in ("quit", "exit", "q"):
            return 0
        elif command == "search" and rest.strip():
            state = await controller.submit_search(rest.strip())
        elif command == "unit" and rest.strip():
            try:
                unit = parse_unit(rest)
            except ValueError as e:
                print(f"Error: {e}")
                continue
            state = await controller.change_unit(unit)
        elif command == "expand":
            state = controller.toggle_expanded()
        elif command == "refresh":
            state = await controller.refresh()
        else:
            print(HELP_TEXT)
            continue
        print(format_dashboard_text(state))


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        data = config.model_dump(mode="json")
        if data["provider"]["api_key"]:
            data["provider"]["api_key"] = "***"
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return 0
    print("Usage: weatherapp config show")
    return 1
