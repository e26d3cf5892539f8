class SiloWizardError(Exception):
    pass


class ConfigImportError(SiloWizardError, ValueError):
    """A deployment config that cannot be turned into a wizard snapshot."""

    def __init__(self, field: str, value: object, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Unrecognized value for {field}: {value!r}")
