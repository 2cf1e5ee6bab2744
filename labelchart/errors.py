from __future__ import annotations


class ChartError(Exception):
    """Base class for every error raised by labelchart."""


class MountError(ChartError):
    """The target container cannot be located or cannot host a drawing surface."""


class ChartDataError(ChartError, ValueError):
    pass


class EmptyDatasetError(ChartDataError):
    pass


class ChartConfigError(ChartError, ValueError):
    pass


class UnknownVariantError(ChartConfigError):
    def __init__(self, variant: object) -> None:
        super().__init__(f"unsupported chart type: {variant!r}")
        self.variant = variant
