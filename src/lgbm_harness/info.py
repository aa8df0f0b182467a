"""Build and machine information for the LightGBM runtime."""

from __future__ import annotations

import os
import platform
from pathlib import Path

import lightgbm
import numpy as np
import psutil
from pydantic import BaseModel, ConfigDict
from threadpoolctl import threadpool_info

__all__: list[str] = [
    "BuildInfo",
    "get_build_info",
]

_ARCH_NAMES = {
    "x86_64": "x86_64 (Intel/AMD 64-bit)",
    "amd64": "x86_64 (Intel/AMD 64-bit)",
    "aarch64": "aarch64 (ARM 64-bit)",
    "arm64": "aarch64 (ARM 64-bit)",
}


class BuildInfo(BaseModel):
    """Runtime facts that affect how LightGBM trains on this machine."""

    model_config = ConfigDict(frozen=True)

    cpu: str
    hardware_threads: int
    cores: int
    memory_gb: float
    architecture: str
    neon: bool
    openmp: bool
    openmp_threads: int | None
    os: str
    python: str
    lightgbm: str
    numpy: str


def _cpu_name() -> str:
    # CPU info - try platform.processor first, fallback for Linux
    cpu = platform.processor()
    if not cpu and platform.system() == "Linux":
        try:
            with Path("/proc/cpuinfo").open() as f:
                for line in f:
                    if line.startswith("model name"):
                        cpu = line.split(":")[1].strip()
                        break
        except (OSError, IndexError):
            pass
    return cpu or "Unknown"


def _openmp_threads() -> int | None:
    # the OpenMP runtime shows up once lightgbm has loaded its shared library
    for pool in threadpool_info():
        if pool.get("user_api") == "openmp":
            return int(pool["num_threads"])
    return None


def describe_architecture(machine: str) -> str:
    """Human-readable name for a ``platform.machine()`` value."""
    if not machine:
        return "unknown"
    return _ARCH_NAMES.get(machine.lower(), machine)


def get_build_info() -> BuildInfo:
    """Collect machine and library information."""
    machine = platform.machine()
    threads = os.cpu_count() or 1
    openmp_threads = _openmp_threads()

    return BuildInfo(
        cpu=_cpu_name(),
        hardware_threads=threads,
        cores=psutil.cpu_count(logical=False) or threads,
        memory_gb=round(psutil.virtual_memory().total / (1024**3), 1),
        architecture=describe_architecture(machine),
        # NEON is mandatory on 64-bit ARM
        neon=machine.lower() in ("aarch64", "arm64"),
        openmp=openmp_threads is not None,
        openmp_threads=openmp_threads,
        os=f"{platform.system()} {platform.release()}",
        python=platform.python_version(),
        lightgbm=getattr(lightgbm, "__version__", "unknown"),
        numpy=np.__version__,
    )
