def _address_input(name: str, *, indexed: bool = False) -> dict:
    return {"name": name, "type": "address", "indexed": indexed}


SILO_DEPLOYER_ABI = [
    {
        "type": "event",
        "name": "SiloCreated",
        "anonymous": False,
        "inputs": [_address_input("siloConfig")],
    },
]

SILO_FACTORY_ABI = [
    {
        "type": "event",
        "name": "NewSilo",
        "anonymous": False,
        "inputs": [
            _address_input("implementation", indexed=True),
            _address_input("token0", indexed=True),
            _address_input("token1", indexed=True),
            _address_input("silo0"),
            _address_input("silo1"),
            _address_input("siloConfig"),
        ],
    },
    {
        "type": "event",
        "name": "NewSiloShareTokens",
        "anonymous": False,
        "inputs": [
            _address_input("protectedShareToken"),
            _address_input("collateralShareToken"),
            _address_input("debtShareToken"),
        ],
    },
    {
        "type": "event",
        "name": "NewSiloHook",
        "anonymous": False,
        "inputs": [
            _address_input("silo", indexed=True),
            _address_input("hook", indexed=True),
        ],
    },
    {
        "type": "function",
        "name": "isSilo",
        "stateMutability": "view",
        "inputs": [{"name": "_silo", "type": "address"}],
        "outputs": [{"name": "", "type": "bool"}],
    },
]

SILO_LENS_VERSION_ABI = [
    {
        "type": "function",
        "name": "getVersion",
        "stateMutability": "view",
        "inputs": [{"name": "_contract", "type": "address"}],
        "outputs": [{"name": "version", "type": "string"}],
    },
    {
        "type": "function",
        "name": "getVersions",
        "stateMutability": "view",
        "inputs": [{"name": "_contracts", "type": "address[]"}],
        "outputs": [{"name": "versions", "type": "string[]"}],
    },
]

SILO_ORACLE_ABI = [
    {
        "type": "function",
        "name": "quote",
        "stateMutability": "view",
        "inputs": [
            {"name": "_baseAmount", "type": "uint256"},
            {"name": "_baseToken", "type": "address"},
        ],
        "outputs": [{"name": "quoteAmount", "type": "uint256"}],
    },
]

ERC20_DECIMALS_ABI = [
    {
        "type": "function",
        "name": "decimals",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
]
