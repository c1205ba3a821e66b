"""Main CLI interface for Marlowe."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from marlowe import accounts, config, utils
from marlowe.environment import snapshot_environment
from marlowe.exceptions import MarloweError, OutputWriteError, UnknownNetworkError
from marlowe.models import NetworkProfile, ProjectConfig
from marlowe.resolver import resolve_project


class MarloweCLI:
    """Main CLI class for Marlowe."""

    def __init__(self, project: ProjectConfig) -> None:
        self.project = project
        self.actions: Dict[str, Tuple[str, Callable[[argparse.Namespace], None]]] = {
            "networks": ("List configured networks", self.show_networks),
            "show": ("Show one network", self.show_network),
            "export": ("Export framework configuration as JSON", self.export_config),
            "accounts": ("List signer accounts", self.show_accounts),
        }

    def run(self, args: argparse.Namespace) -> None:
        """Dispatch a parsed command line."""
        _, callback = self.actions[args.command]
        callback(args)

    def get_profile(self, name: str) -> NetworkProfile:
        profile = self.project.networks.get(name)
        if profile is None:
            known = ", ".join(self.project.network_names())
            raise UnknownNetworkError(f"Unknown network {name!r}. Known networks: {known}")
        return profile

    def show_networks(self, args: argparse.Namespace) -> None:
        rows = []
        for name, profile in self.project.networks.items():
            url = utils.mask_url(profile.url) if profile.is_configured else "<unset>"
            rows.append((name, url, f"{len(profile.accounts)} account(s)"))
        utils.print_rows("Networks", rows)

        for name, profile in self.project.networks.items():
            if not profile.is_configured:
                utils.warn(f"{name}: endpoint not set, the network is unusable until it is configured")

        gas = self.project.gas_reporter
        utils.info(f"Gas reporter: {'enabled' if gas.enabled else 'disabled'}")
        etherscan_state = "configured" if self.project.etherscan.api_key else "not configured"
        utils.info(f"Etherscan verification: {etherscan_state}")

    def show_network(self, args: argparse.Namespace) -> None:
        profile = self.get_profile(args.name)
        utils.section_header(profile.name)
        print(f"{utils.bold('URL:')} {utils.mask_url(profile.url) or '<unset>'}")
        if profile.accounts:
            for key in profile.accounts:
                print(f"{utils.bold('Account key:')} {utils.mask_secret(key)}")
        else:
            print(f"{utils.bold('Account key:')} <unset>")

        if not profile.is_configured:
            spec = config.get_network_spec(profile.name)
            hint = f" Set {spec.url_var} to configure it." if spec else ""
            utils.warn(f"Endpoint not set. Deployments to this network will fail.{hint}")

    def export_config(self, args: argparse.Namespace) -> None:
        data = self.project.to_framework()
        if not args.reveal_secrets:
            data = redact(data)
        text = json.dumps(data, indent=2)

        if args.output:
            try:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(text + "\n")
            except OSError as e:
                raise OutputWriteError(f"Cannot write {args.output}: {e.strerror or e}") from e
            utils.success(f"Configuration written to {args.output}")
        else:
            print(text)

    def show_accounts(self, args: argparse.Namespace) -> None:
        if args.network:
            profile = self.get_profile(args.network)
            project = ProjectConfig(networks={profile.name: profile})
        else:
            project = self.project

        derived = accounts.list_accounts(project, unique=not args.network)
        if not derived:
            utils.warn("No signing credentials configured.")
            return

        for name, addresses in derived.items():
            for address in addresses:
                print(f"{name}: {utils.bold_cyan(address)}")


def redact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of an exported configuration with secrets masked."""
    networks = {}
    for name, options in data["networks"].items():
        options = dict(options)
        if options.get("url"):
            options["url"] = utils.mask_url(options["url"])
        if "accounts" in options:
            options["accounts"] = [utils.mask_secret(key) for key in options["accounts"]]
        networks[name] = options

    gas_reporter = dict(data["gasReporter"])
    if gas_reporter.get("coinmarketcap"):
        gas_reporter["coinmarketcap"] = utils.mask_secret(gas_reporter["coinmarketcap"])

    etherscan = dict(data["etherscan"])
    if etherscan.get("apiKey"):
        etherscan["apiKey"] = utils.mask_secret(etherscan["apiKey"])

    return {"networks": networks, "gasReporter": gas_reporter, "etherscan": etherscan}


def build_parser() -> argparse.ArgumentParser:
    variables = "\n".join(
        f"  {name:<20} {purpose}" for name, purpose in config.list_environment_variables().items()
    )
    parser = argparse.ArgumentParser(
        prog="marlowe",
        description="Resolve deployment network configuration from the environment",
        epilog=f"environment variables:\n{variables}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        help="Read variables from this .env file instead of searching for one"
    )
    parser.add_argument(
        "--no-env-file",
        action="store_true",
        help="Ignore .env files and use only the process environment"
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("networks", help="List configured networks")

    show = subparsers.add_parser("show", help="Show one network")
    show.add_argument("name", help="Network name, e.g. mainnet")

    export = subparsers.add_parser("export", help="Export framework configuration as JSON")
    export.add_argument("-o", "--output", help="Write to this file instead of stdout")
    export.add_argument(
        "--reveal-secrets",
        action="store_true",
        help="Include private keys and API keys unmasked"
    )

    accounts_parser = subparsers.add_parser("accounts", help="List signer accounts")
    accounts_parser.add_argument("--network", help="Only this network")

    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.env_file and args.no_env_file:
        utils.error("Cannot specify both --env-file and --no-env-file")
        return 1

    if args.command is None:
        utils.print_banner()
        parser.print_help()
        return 0

    try:
        env = snapshot_environment(
            environ=environ,
            env_file=args.env_file,
            use_env_file=not args.no_env_file,
        )
        cli = MarloweCLI(resolve_project(env))
        cli.run(args)
    except MarloweError as e:
        utils.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
