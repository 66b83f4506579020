"""
Silence segmentation configuration from environment variables.

- SilenceDetectorConfig: analysis window and minimum silence duration
  (SILENCE_ prefix)
- SplitterConfig: file splitter settings (SPLIT_ prefix)
- A zero duration means "unset" and falls back to the default
- Validation via Pydantic Field constraints
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_STEP_DURATION_S = 0.03
DEFAULT_SILENCE_MIN_DURATION_S = 1.0


class SilenceDetectorConfig(BaseSettings):
    """Silence detector configuration.

    Immutable for the lifetime of a detector.

    Attributes:
        step_duration_s: Duration of one analysis window.
            Default 30ms.
        silence_min_duration_s: Minimum cumulative duration of consecutive
            silent windows that confirms a silence split. Default 1 second.
    """

    step_duration_s: float = Field(
        default=DEFAULT_STEP_DURATION_S,
        ge=0.0,
        le=1.0,
        description="Duration of one analysis window in seconds",
    )
    silence_min_duration_s: float = Field(
        default=DEFAULT_SILENCE_MIN_DURATION_S,
        ge=0.0,
        le=60.0,
        description="Minimum silence duration that splits a segment",
    )

    model_config = {
        "env_prefix": "SILENCE_",
        "case_sensitive": False,
        "frozen": True,
    }

    @field_validator("step_duration_s", mode="after")
    @classmethod
    def _default_step_duration(cls, value: float) -> float:
        return value or DEFAULT_STEP_DURATION_S

    @field_validator("silence_min_duration_s", mode="after")
    @classmethod
    def _default_silence_min_duration(cls, value: float) -> float:
        return value or DEFAULT_SILENCE_MIN_DURATION_S

    @property
    def step_duration_ns(self) -> int:
        """Window duration in nanoseconds."""
        # round() so that e.g. 0.09s compares equal to 3 x 0.03s
        return round(self.step_duration_s * 1_000_000_000)

    @property
    def silence_min_duration_ns(self) -> int:
        """Minimum silence duration in nanoseconds."""
        return round(self.silence_min_duration_s * 1_000_000_000)

    def window_size(self, sample_rate: int) -> int:
        """Number of samples per analysis window at the given sample rate."""
        return sample_rate * self.step_duration_ns // 1_000_000_000


class SplitterConfig(BaseSettings):
    """File splitter configuration.

    Attributes:
        silence_threshold: Level below which a window is silent. Compared
            against the output of the level function (raw amplitude units
            for rms/peak).
        chunk_duration_s: Size of the chunks fed to the detector.
        level_mode: Level function used to analyse windows.
        keep_tail: Write the residual buffer as a final clip at end of file
            when it still holds non-silent audio.
    """

    silence_threshold: float = Field(
        default=500.0,
        ge=0.0,
        description="Level below which a window is considered silent",
    )
    chunk_duration_s: float = Field(
        default=0.1,
        gt=0.0,
        le=60.0,
        description="Duration of audio fed to the detector per call",
    )
    level_mode: Literal["rms", "peak"] = Field(
        default="rms",
        description="Level function: rms or peak",
    )
    keep_tail: bool = Field(
        default=True,
        description="Emit non-silent residual audio at end of input",
    )

    model_config = {
        "env_prefix": "SPLIT_",
        "case_sensitive": False,
    }
