"""Exceptions raised by the energy analysis pipeline."""


class AnalysisError(Exception):
    """Base class for all pipeline failures."""


class LoadError(AnalysisError, IOError):
    """Input file is missing, unreadable, or does not match the track schema."""


class MappingGapError(AnalysisError, ValueError):
    """Album names in the data have no entry in the static lookup tables."""

    def __init__(self, missing_albums):
        self.missing_albums = list(missing_albums)
        super().__init__(
            f"{len(self.missing_albums)} album(s) missing from the release-year mapping: "
            f"{self.missing_albums}"
        )


class ComputationError(AnalysisError, ValueError):
    """An aggregate, chart, or test is undefined for the given input."""
