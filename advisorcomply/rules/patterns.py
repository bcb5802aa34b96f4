"""
Structural patterns for the client privacy check.

Keyword lists cannot express names or account numbers, so these are regexes.
"""
import re

# Any two adjacent capitalized words. Matches "Wall Street" as readily as
# "John Smith"; this crude heuristic is the default name detector.
CLIENT_NAME = re.compile(r"\b[A-Z][a-z]+ [A-Z][a-z]+\b")

SENSITIVE_PATTERNS = {
    "CREDIT_CARD": re.compile(r"\b\d{4}-\d{4}-\d{4}-\d{4}\b"),
    "SSN": re.compile(r"\b\d{3}-\d{2}-\d{4}\b"),
    "SSN_UNFORMATTED": re.compile(r"\b\d{9}\b"),
}

# Checked in this order; the first hit ends the scan.
SENSITIVE_PATTERN_ORDER = ["CREDIT_CARD", "SSN", "SSN_UNFORMATTED"]
