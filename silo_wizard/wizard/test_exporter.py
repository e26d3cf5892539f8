from __future__ import annotations

import json
from decimal import Decimal

from silo_wizard.wizard.exporter import dump_json_config, generate_json_config
from silo_wizard.wizard.importer import parse_json_config
from silo_wizard.wizard.snapshot import (
    ChainlinkOracleConfig,
    FeesConfiguration,
    OracleConfiguration,
    ScalerOracle,
    TokenData,
    TokenFeesConfig,
    TokenOracleConfig,
    WizardSnapshot,
)
from silo_wizard.wizard.test_importer import SAMPLE_CONFIG


def test_fixed_keys_and_defaults_for_empty_snapshot():
    config = generate_json_config(WizardSnapshot())

    assert config["deployer"] == ""
    assert config["hookReceiver"] == "CLONE_IMPLEMENTATION"
    assert config["hookReceiverImplementation"] == "SiloHookV1.sol"
    assert config["maxLtvOracle0"] == "NO_ORACLE"
    assert config["maxLtvOracle1"] == "NO_ORACLE"
    assert config["solvencyOracle0"] == "NO_ORACLE"
    assert config["callBeforeQuote0"] is False
    assert config["callBeforeQuote1"] is False
    assert config["interestRateModel0"] == "DynamicKinkModelFactory.sol"
    assert config["daoFee"] == 0
    assert config["token1"] == ""
    assert "chainlinkOracle0" not in config


def test_display_values():
    snapshot = WizardSnapshot(
        irm_model_type="irm",
        fees_configuration=FeesConfiguration(
            dao_fee=15 * 10**16,
            deployer_fee=5 * 10**15,
            token0=TokenFeesConfig(liquidation_fee=40010000000000000),
        ),
    )
    config = generate_json_config(snapshot)

    assert config["interestRateModel1"] == "InterestRateModelV2Factory.sol"
    assert config["daoFee"] == 15
    assert isinstance(config["daoFee"], int)
    assert config["deployerFee"] == Decimal("0.5")
    assert config["liquidationFee0"] == Decimal("4.001")


def test_oracle_sentinels():
    snapshot = WizardSnapshot(
        token0=TokenData(symbol="wS", name="wS"),
        token1=TokenData(symbol="USDC", name="USDC"),
        oracle_configuration=OracleConfiguration(
            token0=TokenOracleConfig(
                type="scaler", scaler_oracle=ScalerOracle(name="Custom Scaler")
            ),
            token1=TokenOracleConfig(
                type="chainlink",
                chainlink_oracle=ChainlinkOracleConfig(
                    base_token="token0",
                    primary_aggregator="0x" + "ab" * 20,
                    normalization_multiplier="1000000000000",
                ),
            ),
        ),
    )
    config = generate_json_config(snapshot)

    assert config["solvencyOracle0"] == "PLACEHOLDER"
    assert config["solvencyOracle1"] == "Chainlink"
    assert "chainlinkOracle0" not in config
    assert config["chainlinkOracle1"] == {
        "baseToken": "token0",
        "primaryAggregator": "0x" + "ab" * 20,
        "secondaryAggregator": "",
        "normalizationDivider": "0",
        "normalizationMultiplier": "1000000000000",
        "invertSecondPrice": False,
    }


def test_dump_uses_four_space_indent_and_exact_numbers():
    text = dump_json_config(parse_json_config(SAMPLE_CONFIG))

    assert text.startswith('{\n    "deployer": ""')
    assert '"liquidationFee0": 4.001,' in text
    assert '"liquidationTargetLtv0": 80.5,' in text
    assert json.loads(text)["maxLtv0"] == 75


def test_export_import_round_trip():
    snapshot = parse_json_config(SAMPLE_CONFIG)

    reimported = parse_json_config(dump_json_config(snapshot))

    assert reimported == snapshot
    assert dump_json_config(reimported) == dump_json_config(snapshot)
