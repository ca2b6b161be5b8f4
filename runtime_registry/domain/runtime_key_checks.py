"""Completeness and acceptance checks of supplied runtime key names against a backend."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from .backend_types import BackendType
from .runtime_keys import RuntimeKey, runtime_key_list_mandatory_for, runtime_key_supports

INVALID_RUNTIME_KEYS_CODE: Final[str] = "INVALID_RUNTIME_KEYS"

_RUNTIME_KEYS_BY_NAME: Final[dict[str, RuntimeKey]] = {key.value: key for key in RuntimeKey}


class InvalidRuntimeKeysError(ValueError):
    """Raised when supplied runtime keys are missing, unsupported, or unknown for a backend."""


@dataclass(frozen=True)
class RuntimeKeyCheckResult:
    """Result payload for runtime key checks against one backend.

    Attributes:
        backend_type: Backend the supplied keys were checked against.
        missing_mandatory: Sorted mandatory key names absent from the input.
        unsupported: Sorted known key names the backend does not recognize.
        unknown: Sorted supplied names matching no known runtime key.
    """

    backend_type: BackendType
    missing_mandatory: tuple[str, ...]
    unsupported: tuple[str, ...]
    unknown: tuple[str, ...]

    def runtime_key_check_is_valid(self) -> bool:
        """Return whether every supplied key is legal and every mandatory key is present.

        Returns:
            bool: True when no key is missing, unsupported, or unknown.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return not self.missing_mandatory and not self.unsupported and not self.unknown


def domain_resolve_runtime_key(name: str) -> RuntimeKey | None:
    """Resolve an exact, case-sensitive key name to its runtime key.

    Args:
        name: Key name as written in workflow text.

    Returns:
        RuntimeKey | None: Matching runtime key, or None when the name is unknown.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return _RUNTIME_KEYS_BY_NAME.get(name)


def domain_check_runtime_keys(
    backend_type: BackendType,
    supplied_key_names: Iterable[str],
) -> RuntimeKeyCheckResult:
    """Check supplied runtime key names for completeness and acceptance on a backend.

    Args:
        backend_type: Backend the workflow targets.
        supplied_key_names: Runtime key names the workflow author wrote.

    Returns:
        RuntimeKeyCheckResult: Deterministic classification of the supplied names.

    Raises:
        TypeError: Raised when supplied_key_names is a single string.
    """

    if isinstance(supplied_key_names, str):
        raise TypeError("supplied_key_names must be an iterable of names, not a single string")

    supplied_names = set(supplied_key_names)
    unknown: set[str] = set()
    unsupported: set[str] = set()
    for name in supplied_names:
        key = domain_resolve_runtime_key(name)
        if key is None:
            unknown.add(name)
        elif not runtime_key_supports(key, backend_type):
            unsupported.add(name)

    missing_mandatory = {key.value for key in runtime_key_list_mandatory_for(backend_type)} - supplied_names

    return RuntimeKeyCheckResult(
        backend_type=backend_type,
        missing_mandatory=tuple(sorted(missing_mandatory)),
        unsupported=tuple(sorted(unsupported)),
        unknown=tuple(sorted(unknown)),
    )


def domain_raise_for_invalid_runtime_keys(check_result: RuntimeKeyCheckResult) -> None:
    """Raise deterministic error when a runtime key check did not pass.

    Args:
        check_result: Runtime key check result.

    Returns:
        None: This function does not return a value.

    Raises:
        InvalidRuntimeKeysError: Raised when keys are missing, unsupported, or unknown.
    """

    if check_result.runtime_key_check_is_valid():
        return

    details: list[str] = []
    if check_result.missing_mandatory:
        details.append(f"missing mandatory={', '.join(check_result.missing_mandatory)}")
    if check_result.unsupported:
        details.append(f"unsupported={', '.join(check_result.unsupported)}")
    if check_result.unknown:
        details.append(f"unknown={', '.join(check_result.unknown)}")
    message = f"{INVALID_RUNTIME_KEYS_CODE}: backend={check_result.backend_type.value}; {'; '.join(details)}"
    raise InvalidRuntimeKeysError(message)
