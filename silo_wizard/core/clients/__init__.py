from silo_wizard.core.clients.AddressBookClient import AddressBookClient
from silo_wizard.core.clients.SiloRepoClient import SiloRepoClient

__all__ = [
    "AddressBookClient",
    "SiloRepoClient",
]
