"""Receipt date extraction."""

import re

# Tried in order on each line; the first hit in line order wins.
# Matches are unanchored, so "2024-03-15" is caught by the day-first dash pattern as "24-03-15".
DATE_PATTERNS = (
    # MM/DD/YYYY or DD/MM/YY
    re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}"),
    # MM-DD-YYYY or DD-MM-YY
    re.compile(r"\d{1,2}-\d{1,2}-\d{2,4}"),
    # YYYY-MM-DD
    re.compile(r"\d{4}-\d{1,2}-\d{1,2}"),
    # DD Month YYYY
    re.compile(r"\d{1,2}\s+\w+\s+\d{4}"),
)


def extract_receipt_date(lines: list[str]) -> str:
    """Return the first date-shaped substring verbatim, or "" if none."""
    for line in lines:
        for pattern in DATE_PATTERNS:
            match = pattern.search(line)
            if match:
                return match.group(0)
    return ""
