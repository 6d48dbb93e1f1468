"""Well-known POLIS constants."""

BIG_BANG_POLIS_DOMAIN = "https://polis.observer"
"""The first public POLIS service provider.

Software connecting to POLIS for the first time should start here.
"""

TEST_BIG_BANG_POLIS_DOMAIN = "https://test.polis.observer"
"""Experimental provider used to test new POLIS developments."""

POLIS_REFERENCE_PREFIX = "ref://"
"""All POLIS references start with this string."""
