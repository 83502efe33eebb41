# src/models/errors.py

"""Exception taxonomy for the monitoring pipeline."""


class PriceMonitorError(Exception):
    """Base class for every error raised by price_monitor."""

    @property
    def reason(self) -> str:
        """Short reason recorded on a failed cycle."""
        return str(self)


class NavigationError(PriceMonitorError):
    """The target page could not be reached (timeout, missing click target)."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"Navigation to {url} failed: {detail}")

    @property
    def reason(self) -> str:
        return f"NavigationError({self.detail})"


class ElementNotFoundError(PriceMonitorError):
    """A title or price element never became visible."""

    def __init__(self, element: str, selector: str) -> None:
        self.element = element
        self.selector = selector
        super().__init__(
            f"{element} element '{selector}' never became visible"
        )

    @property
    def reason(self) -> str:
        return f"ElementNotFound({self.element})"


class PriceUnparseableError(PriceMonitorError):
    """Extracted price text does not normalize to a number."""

    def __init__(self, raw_text: str) -> None:
        self.raw_text = raw_text
        super().__init__(f"Cannot parse a price from {raw_text!r}")

    @property
    def reason(self) -> str:
        return f"PriceUnparseable({self.raw_text!r})"


class PersistenceReadError(PriceMonitorError):
    """A state file exists but is unreadable or malformed."""


class PersistenceWriteError(PriceMonitorError):
    """A state file could not be written."""


class NotificationError(PriceMonitorError):
    """The webhook sink rejected or never received a notification."""


class SessionAcquisitionError(PriceMonitorError):
    """The shared browser session could not be launched. Fatal for a run."""
