# topmark:header:start
#
#   project      : Termplate
#   file         : version.py
#   file_relpath : src/termplate/version.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Build information for the running Termplate installation.

``COMMIT``, ``BUILD_DATE`` and ``BRANCH`` are placeholders that a release build
may overwrite (e.g. by rewriting this module); installed development copies
report ``"unknown"``.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import asdict, dataclass

from termplate.constants import TERMPLATE_VERSION
from termplate.output.shapes import SingleRecord

COMMIT: str = "unknown"
BUILD_DATE: str = "unknown"
BRANCH: str = "unknown"


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """Version and build metadata.

    Attributes:
        version (str): Package version (PEP 440).
        commit (str): VCS commit of the build.
        date (str): Build timestamp.
        branch (str): VCS branch of the build.
        python_version (str): Interpreter version.
        platform (str): ``<system>/<machine>``, lower-cased.
    """

    version: str
    commit: str
    date: str
    branch: str
    python_version: str
    platform: str

    def __str__(self) -> str:
        return (
            f"{self.version} (commit: {self.commit}, built: {self.date}, "
            f"Python {self.python_version})"
        )

    def to_dict(self) -> dict[str, str]:
        """Return the fields as an ordered plain dict (JSON/YAML friendly)."""
        return asdict(self)

    def to_record(self) -> SingleRecord:
        """Return the fields as a key/value record for table and CSV output."""
        return SingleRecord.from_mapping(self.to_dict())


def get() -> BuildInfo:
    """Return the build information of this installation."""
    return BuildInfo(
        version=TERMPLATE_VERSION,
        commit=COMMIT,
        date=BUILD_DATE,
        branch=BRANCH,
        python_version=platform.python_version(),
        platform=f"{sys.platform}/{platform.machine().lower() or 'unknown'}",
    )
