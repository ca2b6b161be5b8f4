"""Execution backend identifiers recognized by the runtime key registry."""

from __future__ import annotations

from enum import Enum


class BackendType(str, Enum):
    """Closed set of execution backends a workflow can target."""

    JES = "jes"
    LOCAL = "local"
    SGE = "sge"
