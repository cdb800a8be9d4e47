"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import ValidationError

from heic2webp.adapters.discovery import discover, is_eligible
from heic2webp.application.options import ConversionTask
from heic2webp.application.ports import Codec, ProgressReporter
from heic2webp.application.results import (
    ConversionResult,
    EncodedImage,
    Failure,
    RunSummary,
    Success,
)
from heic2webp.backends.registry import create_default_registry
from heic2webp.errors import (
    ConversionError,
    InvalidArgumentError,
    InvalidInputError,
    NotFoundError,
    WriteError,
)
from heic2webp.infrastructure.files import file_size
from heic2webp.schemas import FileConversionConfig, RunConfiguration
from heic2webp.types import DEFAULT_CODEC

logger = logging.getLogger(__name__)


class LoggingReporter:
    """Default reporter that forwards progress to the module logger."""

    def on_empty(self, root: Path) -> None:
        logger.info("no HEIC files found in %s", root)

    def on_start(
        self, root: Path, files: Sequence[Path], config: RunConfiguration
    ) -> None:
        logger.info("converting %d file(s) from %s", len(files), root)

    def on_result(self, result: ConversionResult, config: RunConfiguration) -> None:
        if result.ok:
            logger.info("%s -> %s", result.task.source_path, result.task.destination_path)
        elif isinstance(result.outcome, Failure):
            logger.warning("failed: %s: %s", result.task.source_path, result.outcome.reason)

    def on_finish(self, summary: RunSummary) -> None:
        logger.info("converted %d/%d file(s)", summary.success_count, summary.total)


def build_run_configuration(**params: object) -> RunConfiguration:
    """Validate raw run parameters.

    Raises
    ------
    InvalidArgumentError
        If any parameter is out of range or unknown.
    """
    try:
        return RunConfiguration.model_validate(params)
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid run parameters: {exc}") from exc


def resolve_codec(name: str) -> Codec:
    """Instantiate a built-in codec backend by name."""
    return create_default_registry().create(name)


def convert_task(task: ConversionTask, codec: Codec) -> ConversionResult:
    """Run one task through ``codec``, capturing failures as results.

    Any exception escaping the codec becomes a ``Failure`` so that one bad
    file never aborts a batch.
    """
    try:
        image = codec.convert(task.source_path, task.destination_path, task.quality)
    except ConversionError as exc:
        logger.debug("conversion of %s failed: %s", task.source_path, exc)
        return ConversionResult(task=task, outcome=Failure(error=exc))
    except Exception as exc:
        logger.exception("unexpected error converting %s", task.source_path)
        return ConversionResult(task=task, outcome=Failure(error=exc))
    return ConversionResult(
        task=task,
        outcome=Success(image=image, input_size=file_size(task.source_path)),
    )


def _ensure_output_directory(directory: Path) -> Path:
    resolved = directory.expanduser().resolve()
    try:
        resolved.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(resolved, exc.strerror or str(exc)) from exc
    return resolved


def run_batch(
    config: RunConfiguration,
    *,
    codec: Codec | None = None,
    reporter: ProgressReporter | None = None,
) -> RunSummary:
    """Use-case: convert every eligible file under ``config.input_path``.

    Parameters
    ----------
    config : RunConfiguration
        Validated run configuration.
    codec : Codec | None, default=None
        Codec to use; resolved from ``config.codec`` when omitted.
    reporter : ProgressReporter | None, default=None
        Progress sink; defaults to logging.

    Returns
    -------
    RunSummary
        Per-file results in discovery order plus success/failure counts.

    Raises
    ------
    NotFoundError
        If the input path does not exist.
    InvalidInputError
        If the input is a non-HEIC file or an unreadable directory.
    WriteError
        If the output directory cannot be created.
    BackendError
        If the configured codec is unknown or unavailable.
    """
    reporter = reporter or LoggingReporter()
    root = config.input_path.expanduser().resolve()
    if not root.exists():
        raise NotFoundError(f"Input not found: {root}")
    codec = codec or resolve_codec(config.codec)

    output_directory = (
        _ensure_output_directory(config.output_directory)
        if config.output_directory is not None
        else None
    )

    files = discover(root, recursive=config.recursive)
    summary = RunSummary()
    if not files:
        reporter.on_empty(root)
        return summary

    tasks = [
        ConversionTask.for_source(path, output_directory, config.quality)
        for path in files
    ]
    reporter.on_start(root, files, config)

    if config.jobs > 1 and len(tasks) > 1:
        # map() yields in submission order; the tally stays on this thread.
        with ThreadPoolExecutor(max_workers=config.jobs) as pool:
            for result in pool.map(lambda task: convert_task(task, codec), tasks):
                summary.record(result)
                reporter.on_result(result, config)
    else:
        for task in tasks:
            result = convert_task(task, codec)
            summary.record(result)
            reporter.on_result(result, config)

    reporter.on_finish(summary)
    return summary


def convert_single_file(
    *,
    source_path: Path,
    destination_path: Path | None = None,
    quality: int,
    codec: Codec | None = None,
    codec_name: str = DEFAULT_CODEC,
) -> tuple[Path, EncodedImage]:
    """Use-case: convert one file and raise on failure.

    Returns
    -------
    tuple[Path, EncodedImage]
        Written WebP path and the codec report.
    """
    try:
        config = FileConversionConfig(
            source_path=source_path,
            destination_path=destination_path,
            quality=quality,
            codec=codec_name,
        )
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid conversion parameters: {exc}") from exc

    source = config.source_path.expanduser().resolve()
    if not source.exists():
        raise NotFoundError(f"Input not found: {source}")
    if not is_eligible(source):
        raise InvalidInputError(f"Input file must be a HEIC/HEIF file: {source}")

    if config.destination_path is None:
        task = ConversionTask.for_source(source, quality=config.quality)
    else:
        task = ConversionTask(
            source_path=source,
            destination_path=config.destination_path,
            quality=config.quality,
        )
        _ensure_output_directory(config.destination_path.parent)
    codec = codec or resolve_codec(config.codec)
    image = codec.convert(task.source_path, task.destination_path, task.quality)
    return task.destination_path, image
