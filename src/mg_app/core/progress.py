# src/mg_app/core/progress.py
from __future__ import annotations

import os
from typing import Literal, Protocol, runtime_checkable

# Phases the services may report
Phase = Literal["scan", "classify", "render"]


@runtime_checkable
class ProgressReporter(Protocol):
    def start(self, phase: Phase, total: int | None = None, text: str | None = None) -> None: ...
    def update(self, phase: Phase, advance: int = 1, text: str | None = None) -> None: ...
    def end(self, phase: Phase) -> None: ...


class NoOpReporter:
    def start(self, phase: Phase, total: int | None = None, text: str | None = None) -> None:
        pass

    def update(self, phase: Phase, advance: int = 1, text: str | None = None) -> None:
        pass

    def end(self, phase: Phase) -> None:
        pass


def get_worker_count(
    *,
    env_var: str = "MG_PREVIEW_WORKERS",
    io_bound: bool = True,
    minimum: int = 4,
    cap: int = 64,
) -> int:
    """
    Decide a sensible default pool size. Override via env var `MG_PREVIEW_WORKERS`.

    io_bound=True  -> allow more threads (decoding + disk IO)
    io_bound=False -> closer to CPU count
    """
    val = os.getenv(env_var)
    if val:
        try:
            return max(1, int(val))
        except ValueError:
            pass

    cpu = os.cpu_count() or 4
    n = (cpu * 4) if io_bound else cpu
    return max(minimum, min(cap, n))
