"""Constants shared by the crawlbench models and commands."""

from enum import StrEnum

BOTH = "both"


class CrawlerType(StrEnum):
    """Crawler implementations that can be benchmarked.

    Declaration order is the execution order when both are selected.
    """

    PLAYWRIGHT = "playwright"  # full browser automation
    BEAUTIFULSOUP = "beautifulsoup"  # plain HTTP fetch + HTML parsing

    @classmethod
    def parse_selection(cls, value: "str | CrawlerType") -> list["CrawlerType"]:
        """Turn a CLI/env selection into an ordered list of crawler types.

        Args:
            value: "playwright", "beautifulsoup" or "both" (case-insensitive).

        Returns:
            The selected types in canonical order.

        Raises:
            ValueError: If the value names no known crawler.
        """
        if isinstance(value, CrawlerType):
            return [value]
        normalized = value.strip().lower()
        if normalized == BOTH:
            return list(cls)
        try:
            return [cls(normalized)]
        except ValueError:
            valid = ", ".join([*(c.value for c in cls), BOTH])
            raise ValueError(
                f"Unknown crawler type '{value}'. Valid: {valid}"
            ) from None


SELECTION_CHOICES = [*(c.value for c in CrawlerType), BOTH]

MB = 1024 * 1024
