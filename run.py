#!/usr/bin/env python3
"""
Start the Rio Spots Guide server, or manage its per-environment config files.

    python run.py --env development --reload
    python run.py --create-sample production
"""

import argparse
import os
import sys

from app.config.loader import ConfigLoader, load_config_for_environment
from app.config.settings import Environment, Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rio Spots Guide server")
    parser.add_argument("--env", choices=[e.value for e in Environment],
                        help="environment to run (default: $ENVIRONMENT or development)")
    parser.add_argument("--host", help="bind address (overrides config)")
    parser.add_argument("--port", type=int, help="bind port (overrides config)")
    parser.add_argument("--reload", action="store_true", help="restart on code changes")
    parser.add_argument("--debug", action="store_true", help="enable FastAPI debug mode")

    tools = parser.add_argument_group("configuration files")
    tools.add_argument("--list-envs", action="store_true", help="list environments with a .env.<env> file")
    tools.add_argument("--validate-env", metavar="ENV", help="check that .env.<ENV> exists and loads")
    tools.add_argument("--create-sample", metavar="ENV", help="write .env.<ENV>.sample with every setting")
    return parser


def run_config_command(args: argparse.Namespace) -> bool:
    """Handle the configuration-file options. Returns True if one was given."""
    if args.list_envs:
        print("Available environment configurations:")
        for env in ConfigLoader.get_available_environments():
            print(f"  - {env}")
        return True

    if args.validate_env:
        if not ConfigLoader.validate_environment_config(args.validate_env):
            print(f"✗ Environment '{args.validate_env}' configuration is invalid or missing")
            sys.exit(1)
        print(f"✓ Environment '{args.validate_env}' configuration is valid")
        return True

    if args.create_sample:
        try:
            path = ConfigLoader.create_sample_env_file(args.create_sample)
        except (ValueError, OSError) as e:
            print(f"✗ Failed to create sample configuration: {e}")
            sys.exit(1)
        print(f"✓ Sample configuration created: {path}")
        return True

    return False


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    settings.reload = settings.reload or args.reload
    settings.debug = settings.debug or args.debug
    return settings


def main():
    args = build_parser().parse_args()
    if run_config_command(args):
        return

    try:
        settings = apply_overrides(load_config_for_environment(args.env), args)
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        sys.exit(1)

    if settings.gemini.mock_translations:
        translator = "mock"
    elif settings.gemini.api_key:
        translator = "Gemini"
    else:
        translator = "none (no GEMINI_API_KEY, content stays in the home language)"
    print(f"🚀 {settings.app_name} v{settings.app_version} [{settings.environment.value}]")
    print(f"   http://{settings.host}:{settings.port}  debug={settings.debug} reload={settings.reload}")
    print(f"   home language: {settings.guide.home_language}  translator: {translator}")

    # The server imports app.main afresh and builds its own Settings
    os.environ["ENVIRONMENT"] = settings.environment.value
    os.environ["DEBUG"] = str(settings.debug).lower()

    import uvicorn

    # Guide state lives in one process
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=1,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
