"""Domain models for runtime key and backend compatibility."""

from .backend_types import BackendType
from .runtime_key_checks import (
    INVALID_RUNTIME_KEYS_CODE,
    InvalidRuntimeKeysError,
    RuntimeKeyCheckResult,
    domain_check_runtime_keys,
    domain_raise_for_invalid_runtime_keys,
    domain_resolve_runtime_key,
)
from .runtime_keys import (
    RUNTIME_KEY_SUPPORT,
    RuntimeKey,
    RuntimeKeyRegistryError,
    RuntimeKeySupport,
    runtime_key_build_table,
    runtime_key_is_mandatory,
    runtime_key_is_optional,
    runtime_key_list_mandatory_for,
    runtime_key_list_supported_for,
    runtime_key_support,
    runtime_key_supports,
)

__all__ = [
    "BackendType",
    "INVALID_RUNTIME_KEYS_CODE",
    "InvalidRuntimeKeysError",
    "RUNTIME_KEY_SUPPORT",
    "RuntimeKey",
    "RuntimeKeyCheckResult",
    "RuntimeKeyRegistryError",
    "RuntimeKeySupport",
    "domain_check_runtime_keys",
    "domain_raise_for_invalid_runtime_keys",
    "domain_resolve_runtime_key",
    "runtime_key_build_table",
    "runtime_key_is_mandatory",
    "runtime_key_is_optional",
    "runtime_key_list_mandatory_for",
    "runtime_key_list_supported_for",
    "runtime_key_support",
    "runtime_key_supports",
]
