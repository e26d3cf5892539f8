from silo_wizard.verification.deploy_events import (
    DeploymentRecord,
    ShareTokens,
    decode_deploy_receipt,
)
from silo_wizard.verification.fields import (
    is_base_discount_percent_out_of_range,
    is_dao_fee_in_range,
    is_fee_unexpectedly_high,
    is_price_decimals_invalid,
    is_price_unexpectedly_high,
    is_price_unexpectedly_low,
    is_value_high_5,
    ltv_lt_liquidation_fee_consistent,
    verify_address,
    verify_dao_fee,
    verify_deployer_fee,
    verify_hook_owner,
    verify_irm_owner,
    verify_numeric_value,
    verify_silo_implementation,
    verify_token,
)
from silo_wizard.verification.onchain import (
    verify_address_in_address_book,
    verify_silo_address,
)
from silo_wizard.verification.oracle_quotes import (
    build_oracle_quote_checks,
    price_does_not_return_zero,
    quote_is_linear_function,
    quote_large_amounts_does_not_revert,
)
from silo_wizard.verification.summary import (
    MarketConfig,
    SiloMarketConfig,
    VerificationCheckItem,
    VerificationOptions,
    build_verification_checks,
)
from silo_wizard.verification.versions import fetch_silo_lens_versions

__all__ = [
    "DeploymentRecord",
    "MarketConfig",
    "ShareTokens",
    "SiloMarketConfig",
    "VerificationCheckItem",
    "VerificationOptions",
    "build_oracle_quote_checks",
    "build_verification_checks",
    "decode_deploy_receipt",
    "fetch_silo_lens_versions",
    "is_base_discount_percent_out_of_range",
    "is_dao_fee_in_range",
    "is_fee_unexpectedly_high",
    "is_price_decimals_invalid",
    "is_price_unexpectedly_high",
    "is_price_unexpectedly_low",
    "is_value_high_5",
    "ltv_lt_liquidation_fee_consistent",
    "price_does_not_return_zero",
    "quote_is_linear_function",
    "quote_large_amounts_does_not_revert",
    "verify_address",
    "verify_address_in_address_book",
    "verify_dao_fee",
    "verify_deployer_fee",
    "verify_hook_owner",
    "verify_irm_owner",
    "verify_numeric_value",
    "verify_silo_address",
    "verify_silo_implementation",
    "verify_token",
]
