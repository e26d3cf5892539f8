"""Decode the addresses created by a Silo market deployment transaction.

Share tokens and hooks are emitted once per silo with nothing in the event
telling the two apart, so the first occurrence belongs to silo 0 and the second
to silo 1. The decode is a fold over the receipt logs carrying those two
counters; reordering the logs reorders the assignment.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Any

from eth_abi.codec import ABICodec
from hexbytes import HexBytes
from web3 import Web3
from web3._utils.events import event_abi_to_log_topic, get_event_data

from silo_wizard.core.constants.silo_abi import SILO_DEPLOYER_ABI, SILO_FACTORY_ABI


def _events_by_topic(abi: list[dict[str, Any]]) -> dict[HexBytes, dict[str, Any]]:
    return {
        HexBytes(event_abi_to_log_topic(item)): item
        for item in abi
        if item.get("type") == "event"
    }


_DEPLOYER_EVENTS = _events_by_topic(SILO_DEPLOYER_ABI)
_FACTORY_EVENTS = _events_by_topic(SILO_FACTORY_ABI)

# get_event_data reads these keys; decoded-only logs may not carry them
_LOG_DEFAULTS: dict[str, Any] = {
    "address": None,
    "logIndex": 0,
    "transactionIndex": 0,
    "transactionHash": b"\x00" * 32,
    "blockHash": b"\x00" * 32,
    "blockNumber": 0,
}


@dataclass(frozen=True)
class ShareTokens:
    protected: str
    collateral: str
    debt: str


@dataclass(frozen=True)
class DeploymentRecord:
    silo_config: str | None = None
    silo0: str | None = None
    silo1: str | None = None
    token0: str | None = None
    token1: str | None = None
    implementation: str | None = None
    share_tokens0: ShareTokens | None = None
    share_tokens1: ShareTokens | None = None
    hook0: str | None = None
    hook1: str | None = None

    def to_dict(self) -> dict[str, Any]:
        def _tokens(tokens: ShareTokens | None) -> dict[str, str] | None:
            if tokens is None:
                return None
            return {
                "protectedShareToken": tokens.protected,
                "collateralShareToken": tokens.collateral,
                "debtShareToken": tokens.debt,
            }

        return {
            "siloConfig": self.silo_config,
            "silo0": self.silo0,
            "silo1": self.silo1,
            "token0": self.token0,
            "token1": self.token1,
            "implementation": self.implementation,
            "shareTokens0": _tokens(self.share_tokens0),
            "shareTokens1": _tokens(self.share_tokens1),
            "hook0": self.hook0,
            "hook1": self.hook1,
        }


@dataclass(frozen=True)
class _DecodeState:
    record: DeploymentRecord = field(default_factory=DeploymentRecord)
    share_token_index: int = 0
    hook_index: int = 0


def _decode(
    codec: ABICodec, events: dict[HexBytes, dict[str, Any]], log: Mapping[str, Any]
) -> tuple[str, dict[str, Any]] | None:
    topics = log.get("topics") or []
    if not topics:
        return None
    try:
        topics = [HexBytes(topic) for topic in topics]
        data = HexBytes(log.get("data") or b"")
    except (TypeError, ValueError):
        return None
    event_abi = events.get(topics[0])
    if event_abi is None:
        return None
    entry = {**_LOG_DEFAULTS, **dict(log), "topics": topics, "data": data}
    try:
        decoded = get_event_data(codec, event_abi, entry)
    except Exception:
        return None
    return decoded["event"], dict(decoded["args"])


def _apply_log(
    codec: ABICodec, state: _DecodeState, log: Mapping[str, Any]
) -> _DecodeState:
    deployer_event = _decode(codec, _DEPLOYER_EVENTS, log)
    if deployer_event is not None and deployer_event[0] == "SiloCreated":
        return replace(
            state,
            record=replace(state.record, silo_config=deployer_event[1]["siloConfig"]),
        )

    factory_event = _decode(codec, _FACTORY_EVENTS, log)
    if factory_event is None:
        return state
    name, args = factory_event
    record = state.record

    if name == "NewSilo":
        return replace(
            state,
            record=replace(
                record,
                implementation=args["implementation"],
                token0=args["token0"],
                token1=args["token1"],
                silo0=args["silo0"],
                silo1=args["silo1"],
                silo_config=record.silo_config or args["siloConfig"],
            ),
        )

    if name == "NewSiloShareTokens":
        tokens = ShareTokens(
            protected=args["protectedShareToken"],
            collateral=args["collateralShareToken"],
            debt=args["debtShareToken"],
        )
        if state.share_token_index == 0:
            record = replace(record, share_tokens0=tokens)
        else:
            record = replace(record, share_tokens1=tokens)
        return replace(
            state, record=record, share_token_index=state.share_token_index + 1
        )

    if name == "NewSiloHook":
        if state.hook_index == 0:
            record = replace(record, hook0=args["hook"])
        else:
            record = replace(record, hook1=args["hook"])
        return replace(state, record=record, hook_index=state.hook_index + 1)

    return state


def decode_deploy_receipt(
    receipt_or_logs: Mapping[str, Any] | Iterable[Mapping[str, Any]],
    *,
    codec: ABICodec | None = None,
) -> DeploymentRecord:
    """Fold a receipt (or its ``logs`` list) into a DeploymentRecord.

    Logs that match neither the deployer nor the factory events, or fail to
    decode, are skipped.
    """
    if isinstance(receipt_or_logs, Mapping):
        logs = receipt_or_logs.get("logs") or []
    else:
        logs = receipt_or_logs
    codec = codec or Web3().codec

    final = reduce(
        lambda state, log: _apply_log(codec, state, log), logs, _DecodeState()
    )
    return final.record
