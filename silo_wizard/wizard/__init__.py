from silo_wizard.wizard.exporter import dump_json_config, generate_json_config
from silo_wizard.wizard.importer import parse_json_config, snapshot_from_config
from silo_wizard.wizard.snapshot import WizardSnapshot

__all__ = [
    "WizardSnapshot",
    "dump_json_config",
    "generate_json_config",
    "parse_json_config",
    "snapshot_from_config",
]
