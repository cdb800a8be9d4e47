"""Application-layer use-cases, tasks and result objects."""

from __future__ import annotations

from heic2webp.application.options import ConversionTask, destination_for
from heic2webp.application.ports import Codec, ProgressReporter
from heic2webp.application.results import (
    ConversionResult,
    EncodedImage,
    Failure,
    RunSummary,
    Success,
)
from heic2webp.schemas import RunConfiguration


def run_batch(
    config: RunConfiguration,
    *,
    codec: Codec | None = None,
    reporter: ProgressReporter | None = None,
) -> RunSummary:
    """Run a batch conversion via lazy use-case import."""
    from heic2webp.application.use_cases import run_batch as _impl

    return _impl(config, codec=codec, reporter=reporter)


def build_run_configuration(**params: object) -> RunConfiguration:
    """Build a validated run configuration via lazy use-case import."""
    from heic2webp.application.use_cases import build_run_configuration as _impl

    return _impl(**params)


__all__ = [
    "Codec",
    "ConversionResult",
    "ConversionTask",
    "EncodedImage",
    "Failure",
    "ProgressReporter",
    "RunConfiguration",
    "RunSummary",
    "Success",
    "build_run_configuration",
    "destination_for",
    "run_batch",
]
