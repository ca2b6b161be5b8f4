"""Canonical runtime key support matrix for workflow backend validation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, unique
from types import MappingProxyType
from typing import Final

from .backend_types import BackendType

logger = logging.getLogger(__name__)


@unique
class RuntimeKey(str, Enum):
    """Known workflow runtime keys, valued by the name authors write in workflow text."""

    CPU = "cpu"
    DEFAULT_DISKS = "defaultDisks"
    DEFAULT_ZONES = "defaultZones"
    DOCKER = "docker"
    FAIL_ON_STDERR = "failOnStderr"
    FAIL_ON_RC = "failOnRc"
    MEMORY = "memory"
    PREEMPTIBLE = "preemptible"


class RuntimeKeyRegistryError(RuntimeError):
    """Raised when the runtime key support table is malformed."""


@dataclass(frozen=True)
class RuntimeKeySupport:
    """Backend support classification for one runtime key.

    Attributes:
        mandatory_backends: Backends on which the key must be supplied.
        optional_backends: Backends on which the key may be supplied.
    """

    mandatory_backends: frozenset[BackendType] = frozenset()
    optional_backends: frozenset[BackendType] = frozenset()


def runtime_key_build_table(
    entries: Mapping[RuntimeKey, RuntimeKeySupport],
) -> Mapping[RuntimeKey, RuntimeKeySupport]:
    """Validate support entries and freeze them into a read-only table.

    Args:
        entries: Support classification per runtime key.

    Returns:
        Mapping[RuntimeKey, RuntimeKeySupport]: Read-only table in declaration order.

    Raises:
        RuntimeKeyRegistryError: Raised when keys are missing or unexpected, or a
            backend is both mandatory and optional for one key.
    """

    missing_keys = [key.name for key in RuntimeKey if key not in entries]
    if missing_keys:
        raise RuntimeKeyRegistryError(f"runtime keys without support entry: {', '.join(missing_keys)}")

    unexpected_keys = [repr(key) for key in entries if not isinstance(key, RuntimeKey)]
    if unexpected_keys:
        raise RuntimeKeyRegistryError(f"unexpected runtime key entries: {', '.join(unexpected_keys)}")

    for key, support in entries.items():
        overlapping_backends = support.mandatory_backends & support.optional_backends
        if overlapping_backends:
            overlap_labels = sorted(backend_type.value for backend_type in overlapping_backends)
            raise RuntimeKeyRegistryError(
                f"runtime key {key.value} is both mandatory and optional on: {', '.join(overlap_labels)}"
            )

    table = MappingProxyType({key: entries[key] for key in RuntimeKey})
    logger.debug("Runtime key table validated with %d keys", len(table))
    return table


RUNTIME_KEY_SUPPORT: Final[Mapping[RuntimeKey, RuntimeKeySupport]] = runtime_key_build_table(
    {
        RuntimeKey.CPU: RuntimeKeySupport(optional_backends=frozenset({BackendType.JES})),
        RuntimeKey.DEFAULT_DISKS: RuntimeKeySupport(optional_backends=frozenset({BackendType.JES})),
        RuntimeKey.DEFAULT_ZONES: RuntimeKeySupport(optional_backends=frozenset({BackendType.JES})),
        RuntimeKey.DOCKER: RuntimeKeySupport(
            mandatory_backends=frozenset({BackendType.JES}),
            optional_backends=frozenset({BackendType.LOCAL}),
        ),
        RuntimeKey.FAIL_ON_STDERR: RuntimeKeySupport(
            optional_backends=frozenset({BackendType.JES, BackendType.LOCAL, BackendType.SGE}),
        ),
        RuntimeKey.FAIL_ON_RC: RuntimeKeySupport(
            optional_backends=frozenset({BackendType.LOCAL, BackendType.SGE}),
        ),
        RuntimeKey.MEMORY: RuntimeKeySupport(optional_backends=frozenset({BackendType.JES})),
        RuntimeKey.PREEMPTIBLE: RuntimeKeySupport(optional_backends=frozenset({BackendType.JES})),
    }
)


def runtime_key_support(key: RuntimeKey) -> RuntimeKeySupport:
    """Return the static support classification for a runtime key.

    Args:
        key: Runtime key to classify.

    Returns:
        RuntimeKeySupport: Mandatory and optional backend sets for the key.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return RUNTIME_KEY_SUPPORT[key]


def runtime_key_is_mandatory(key: RuntimeKey, backend_type: BackendType) -> bool:
    """Return whether the key must be supplied when targeting the backend."""

    return backend_type in RUNTIME_KEY_SUPPORT[key].mandatory_backends


def runtime_key_is_optional(key: RuntimeKey, backend_type: BackendType) -> bool:
    """Return whether the key may be supplied, but is not required, on the backend."""

    return backend_type in RUNTIME_KEY_SUPPORT[key].optional_backends


def runtime_key_supports(key: RuntimeKey, backend_type: BackendType) -> bool:
    """Return whether the key is recognized at all on the backend.

    Args:
        key: Runtime key supplied by a workflow author.
        backend_type: Backend the workflow targets.

    Returns:
        bool: True when the key is mandatory or optional on the backend.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return runtime_key_is_mandatory(key, backend_type) or runtime_key_is_optional(key, backend_type)


def runtime_key_list_mandatory_for(backend_type: BackendType) -> tuple[RuntimeKey, ...]:
    """Return keys that must be supplied for the backend, in declaration order."""

    return tuple(key for key in RuntimeKey if runtime_key_is_mandatory(key, backend_type))


def runtime_key_list_supported_for(backend_type: BackendType) -> tuple[RuntimeKey, ...]:
    """Return keys recognized on the backend, in declaration order."""

    return tuple(key for key in RuntimeKey if runtime_key_supports(key, backend_type))
