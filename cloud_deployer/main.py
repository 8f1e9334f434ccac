"""
Pipeline Deployer - CLI Entry Point.

Commands:
    render <config.json>      Print the rendered pod manifest
    run <config.json>         Run Checkout -> Build -> Deploy
    providers                 List registered strategies and templates

Exit codes:
    0  success / Succeeded
    1  pipeline Failed
    2  invalid configuration file or arguments
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.core.bootstrap import bootstrap
from cloud_deployer.core.config_loader import load_credentials, load_run_config
from cloud_deployer.core.exceptions import ConfigurationError, error_kind
from cloud_deployer.core.manifest import render_manifest
from cloud_deployer.core.registry import ProviderRegistry
from cloud_deployer.factory import run_pipeline
from cloud_deployer.logger import configure_logger, logger, print_stack_trace
from cloud_deployer.settings import get_settings

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloud-deployer",
        description="Render provider manifests and run the deployment pipeline."
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--template-dir", help="Directory with <provider>.yaml templates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Print the rendered pod manifest")
    render_parser.add_argument("config", help="Path to the run configuration JSON")
    render_parser.add_argument("--output", "-o", help="Write the manifest to this file")

    run_parser = subparsers.add_parser("run", help="Run Checkout -> Build -> Deploy")
    run_parser.add_argument("config", help="Path to the run configuration JSON")
    run_parser.add_argument(
        "--credentials",
        default=CONSTANTS.CONFIG_CREDENTIALS_FILE,
        help="Path to the provider credentials JSON (optional file)"
    )
    run_parser.add_argument("--manifest-out", help="Write the rendered manifest to this file")

    subparsers.add_parser("providers", help="List registered strategies and templates")
    return parser


def _settings_from_args(args):
    settings = get_settings()
    updates = {}
    if args.debug:
        updates["debug"] = True
    if args.template_dir:
        updates["template_dir"] = args.template_dir
    if updates:
        settings = settings.model_copy(update=updates)
    return settings


def cmd_render(args, store) -> int:
    config = load_run_config(Path(args.config))
    manifest = render_manifest(config, store)
    if args.output:
        Path(args.output).write_text(manifest, encoding="utf-8")
        logger.info(f"Manifest written to {args.output}")
    else:
        print(manifest, end="" if manifest.endswith("\n") else "\n")
    return EXIT_OK


def cmd_run(args, store, settings) -> int:
    config = load_run_config(Path(args.config))
    credentials = load_credentials(Path(args.credentials))

    result = run_pipeline(config, store, settings, credentials=credentials)

    if args.manifest_out and result.manifest is not None:
        Path(args.manifest_out).write_text(result.manifest, encoding="utf-8")

    summary = {key: value for key, value in result.to_dict().items() if key != "manifest"}
    print(json.dumps(summary, indent=2))
    return EXIT_OK if result.succeeded else EXIT_FAILED


def cmd_providers(store) -> int:
    print(json.dumps({
        "strategies": ProviderRegistry.list_providers(),
        "templates": store.providers(),
    }, indent=2))
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        configure_logger(debug_mode=True)

    try:
        settings = _settings_from_args(args)
        store = bootstrap(settings)

        if args.command == "render":
            return cmd_render(args, store)
        if args.command == "run":
            return cmd_run(args, store, settings)
        return cmd_providers(store)
    except ConfigurationError as e:
        print_stack_trace()
        logger.error(f"{error_kind(e)}: {e}")
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
