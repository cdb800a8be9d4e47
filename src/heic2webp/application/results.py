"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from heic2webp.application.options import ConversionTask
from heic2webp.errors import ConversionError


@dataclass(frozen=True)
class EncodedImage:
    """What a codec reports after writing a WebP file."""

    width: int
    height: int
    output_size: int


@dataclass(frozen=True)
class Success:
    """Successful conversion outcome."""

    image: EncodedImage
    input_size: int

    @property
    def size_reduction(self) -> float:
        """Percentage saved relative to the input, ``(1 - out/in) * 100``."""
        if self.input_size <= 0:
            return 0.0
        return (1.0 - self.image.output_size / self.input_size) * 100.0


@dataclass(frozen=True)
class Failure:
    """Failed conversion outcome."""

    error: Exception

    @property
    def reason(self) -> str:
        """Labelled, human-readable failure message."""
        if isinstance(self.error, ConversionError):
            return str(self.error)
        return f"{type(self.error).__name__}: {self.error}"


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of converting one task."""

    task: ConversionTask
    outcome: Success | Failure

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)


@dataclass
class RunSummary:
    """Tally of one batch run, in discovery order."""

    results: list[ConversionResult] = field(default_factory=list)
    success_count: int = 0
    failure_count: int = 0

    def record(self, result: ConversionResult) -> None:
        """Append a result and update the counters."""
        self.results.append(result)
        if result.ok:
            self.success_count += 1
        else:
            self.failure_count += 1

    @property
    def total(self) -> int:
        return self.success_count + self.failure_count

    @property
    def ok(self) -> bool:
        """``True`` when no file failed (an empty run counts as ok)."""
        return self.failure_count == 0
