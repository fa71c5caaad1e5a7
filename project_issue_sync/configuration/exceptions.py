"""Contains exceptions raised when reconciling application configuration."""


class RequiredConfigurationElementError(Exception):
    """Raised when one or more required configuration elements are missing."""

    def __init__(self, missing: list[dict[str, str]]) -> None:
        """Initializes the exception with the missing elements."""
        names = ", ".join(element["name"] for element in missing)
        super().__init__(f"Missing required configuration element(s): {names}")
        self.missing = missing

    def describe(self) -> list[str]:
        """Return one operator-facing line per missing element."""
        return [
            f"{element['name']} (command line option --{element['cli_name'].replace('_', '-')}, "
            f"environment variable {element['env_name']}): {element['help']}"
            for element in self.missing
        ]
