"""Outcomes of a recipe import that are reported back to the user."""

from __future__ import annotations

from enum import Enum


class ExtractionError(Enum):
    BAD_URL = "bad_url"
    CHECK_CONNECTION = "check_connection"
    WEBSITE_NOT_SUPPORTED = "website_not_supported"

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_TITLES = {
    ExtractionError.BAD_URL: "Bad URL",
    ExtractionError.CHECK_CONNECTION: "Connection error",
    ExtractionError.WEBSITE_NOT_SUPPORTED: "Parsing error",
}

_DESCRIPTIONS = {
    ExtractionError.BAD_URL: "Please check the entered URL.",
    ExtractionError.CHECK_CONNECTION: (
        "Unable to load website content. Please check your internet connection."
    ),
    ExtractionError.WEBSITE_NOT_SUPPORTED: (
        "This website might not be currently supported. If this appears incorrect, "
        "you can use the support options in the app settings to raise awareness "
        "about this issue."
    ),
}
