"""Shared utility functions.

This subpackage provides helpers used across the package.

Key modules:
    - logging: Logging configuration and credential redaction
    - protocols: Protocol definitions for pluggable components
"""

from .logging import (
    configure_logging,
    get_logger,
    sanitize_text,
    describe_exception,
)
from .protocols import JudgeProtocol, VotingStrategyProtocol, JuryProtocol

__all__ = [
    # logging
    "configure_logging",
    "get_logger",
    "sanitize_text",
    "describe_exception",
    # protocols
    "JudgeProtocol",
    "VotingStrategyProtocol",
    "JuryProtocol",
]
