"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or prints the runtime key support matrix.
"""

import argparse

import uvicorn

from runtime_registry.bootstrap import bootstrap_create_application
from runtime_registry.config import config_load_settings
from runtime_registry.domain import RuntimeKey, runtime_key_support


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Runtime key registry entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "matrix"),
        help="Runtime command: `api` starts server, `matrix` prints the runtime key support matrix",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    if parsed_arguments.command == "matrix":
        for line in main_format_support_matrix():
            print(line)
        return

    settings = config_load_settings()
    application = bootstrap_create_application()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_format_support_matrix() -> list[str]:
    """Format one tab-separated support line per runtime key.

    Returns:
        list[str]: Lines in key declaration order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    lines: list[str] = []
    for key in RuntimeKey:
        support = runtime_key_support(key)
        mandatory = ",".join(sorted(backend_type.value for backend_type in support.mandatory_backends))
        optional = ",".join(sorted(backend_type.value for backend_type in support.optional_backends))
        lines.append(f"{key.value}\tmandatory={mandatory}\toptional={optional}")
    return lines


if __name__ == "__main__":
    main()
