"""
Runtime settings read from the environment.
"""
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI, the web service and provider factories"""
    fps: float = 0.0              # 0 selects the timecode default frame rate
    log_level: str = 'WARNING'
    host: str = '127.0.0.1'
    port: int = 8080

    @classmethod
    def from_env(cls) -> 'Settings':
        """
        Build settings from TRANSCODE_PREP_* environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        return cls(
            fps=_number('TRANSCODE_PREP_FPS', '0', float),
            log_level=os.getenv('TRANSCODE_PREP_LOG_LEVEL', 'WARNING').upper(),
            host=os.getenv('TRANSCODE_PREP_HOST', '127.0.0.1'),
            port=_number('TRANSCODE_PREP_PORT', '8080', int),
        )


def _number(name: str, default: str, kind):
    raw = os.getenv(name, default)
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"Invalid {name}: {raw!r}. Expected a number")
