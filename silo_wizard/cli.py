from __future__ import annotations

import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

import click
from loguru import logger

from silo_wizard.core.clients.AddressBookClient import AddressBookClient
from silo_wizard.core.config import get_rpc_urls, load_config, set_rpc_urls
from silo_wizard.core.utils.addresses import is_zero_address
from silo_wizard.core.utils.formatting import (
    format_bigint_to_e18,
    format_percentage,
    format_wizard_bigint_to_e18,
    parse_numeric_input_to_int,
)
from silo_wizard.core.utils.precise_json import parse_json_preserving_bigint
from silo_wizard.core.utils.units import (
    display_to_scaled,
    wizard_basis_points_to_scaled,
)
from silo_wizard.core.utils.web3 import web3_from_chain_id
from silo_wizard.verification.deploy_events import decode_deploy_receipt
from silo_wizard.verification.oracle_quotes import (
    find_quote_linearity_break,
    price_does_not_return_zero,
    quote_large_amounts_does_not_revert,
)
from silo_wizard.verification.versions import fetch_silo_lens_versions
from silo_wizard.wizard.exporter import dump_json_config
from silo_wizard.wizard.importer import parse_json_config


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


@click.group(name="silo-wizard", help="Silo market config and deployment checks.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to config.json (defaults to SILO_WIZARD_CONFIG_PATH or ./config.json).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def cli(config_path: str | None, log_level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=str(log_level).upper())
    if config_path:
        load_config(config_path, require_exists=True)


@cli.command(
    name="format-e18", help="Format an integer (e.g. 1.5e18) as <int>.<frac>e18."
)
@click.argument("value")
@click.option("--full", is_flag=True, default=False, help="Keep all 18 digits.")
@click.option(
    "--wizard",
    is_flag=True,
    default=False,
    help="Treat VALUE as wizard storage (percentage * 1e16).",
)
def format_e18_cmd(value: str, full: bool, wizard: bool) -> None:
    parsed = parse_numeric_input_to_int(value)
    if parsed is None:
        raise click.BadParameter(f"not an integer: {value}", param_hint="VALUE")
    formatter = format_wizard_bigint_to_e18 if wizard else format_bigint_to_e18
    click.echo(formatter(parsed, full_precision=full))


@cli.command(
    name="to-scaled", help="Convert a display percentage to its on-chain value."
)
@click.argument("percentage")
@click.option(
    "--basis-points",
    is_flag=True,
    default=False,
    help="Use the fee path: round(percentage * 100) * 1e14.",
)
def to_scaled_cmd(percentage: str, basis_points: bool) -> None:
    try:
        if basis_points:
            scaled = wizard_basis_points_to_scaled(percentage)
        else:
            scaled = display_to_scaled(percentage)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="PERCENTAGE") from exc
    _echo_json(
        {
            "input": percentage,
            "path": "basis_points" if basis_points else "percentage",
            "scaled": str(scaled),
            "e18": format_bigint_to_e18(scaled),
            "display": format_percentage(scaled),
        }
    )


@cli.command(name="import-config", help="Parse a deployment config into a snapshot.")
@click.argument("path", type=click.Path(allow_dash=True))
@click.option(
    "--strict/--lenient",
    default=None,
    help="Reject unknown oracle, IRM factory and hook values (default from config).",
)
def import_config_cmd(path: str, strict: bool | None) -> None:
    snapshot = parse_json_config(_read_text(path), strict_sentinels=strict)
    _echo_json(asdict(snapshot))


@cli.command(
    name="export-config",
    help="Re-export a deployment config through the wizard snapshot (normalizes it).",
)
@click.argument("path", type=click.Path(allow_dash=True))
@click.option("--strict/--lenient", default=None)
def export_config_cmd(path: str, strict: bool | None) -> None:
    snapshot = parse_json_config(_read_text(path), strict_sentinels=strict)
    click.echo(dump_json_config(snapshot))


@cli.command(
    name="decode-receipt",
    help="Extract silo, token, share token and hook addresses from a deploy receipt.",
)
@click.argument("path", type=click.Path(allow_dash=True))
def decode_receipt_cmd(path: str) -> None:
    receipt = parse_json_preserving_bigint(_read_text(path))
    record = decode_deploy_receipt(receipt)
    _echo_json(record.to_dict())


@cli.command(name="resolve-symbol", help="Look up a name in the Silo address book.")
@click.option("--chain-id", type=int, required=True)
@click.argument("symbol")
def resolve_symbol_cmd(chain_id: int, symbol: str) -> None:
    async def _run() -> tuple[str, str] | None:
        return await AddressBookClient().resolve_symbol_to_address(chain_id, symbol)

    found = asyncio.run(_run())
    if found is None:
        _echo_json({"ok": False, "error": "not_found", "symbol": symbol})
        return
    address, exact_symbol = found
    _echo_json({"ok": True, "result": {"address": address, "symbol": exact_symbol}})


@cli.command(name="versions", help="Read contract versions through the Silo lens.")
@click.option("--chain-id", type=int, required=True)
@click.option("--lens", "lens_address", required=True, help="SiloLens address.")
@click.option(
    "--rpc-url",
    "rpc_urls",
    multiple=True,
    help="RPC endpoint for this chain (overrides network.rpc_urls; repeatable).",
)
@click.argument("addresses", nargs=-1, required=True)
def versions_cmd(
    chain_id: int,
    lens_address: str,
    rpc_urls: tuple[str, ...],
    addresses: tuple[str, ...],
) -> None:
    if rpc_urls:
        set_rpc_urls({**get_rpc_urls(), str(chain_id): list(rpc_urls)})

    async def _run() -> dict[str, str]:
        async with web3_from_chain_id(chain_id) as web3:
            return await fetch_silo_lens_versions(
                web3, lens_address, chain_id, list(addresses)
            )

    _echo_json(asyncio.run(_run()))


@cli.command(name="check-oracle", help="Run quote sanity checks against an oracle.")
@click.option("--chain-id", type=int, required=True)
@click.option("--oracle", "oracle_address", required=True)
@click.option("--token", required=True, help="Base token passed to quote().")
def check_oracle_cmd(chain_id: int, oracle_address: str, token: str) -> None:
    if is_zero_address(oracle_address):
        raise click.BadParameter("oracle address is zero", param_hint="--oracle")

    async def _run() -> dict[str, Any]:
        async with web3_from_chain_id(chain_id) as web3:
            breaks_at = await find_quote_linearity_break(web3, oracle_address, token)
            return {
                "price_does_not_return_zero": await price_does_not_return_zero(
                    web3, oracle_address, token
                ),
                "quote_is_linear": breaks_at is None,
                "linearity_breaks_at": None if breaks_at is None else str(breaks_at),
                "large_amounts_do_not_revert": (
                    await quote_large_amounts_does_not_revert(
                        web3, oracle_address, token
                    )
                ),
            }

    _echo_json(asyncio.run(_run()))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
