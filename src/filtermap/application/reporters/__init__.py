"""Reporters for pipeline traces.

Output is str, not print(). Caller decides destination.
"""

from filtermap.application.reporters.console import ConsoleConfig, ConsoleReporter
from filtermap.application.reporters.plain_text import PlainTextReporter
from filtermap.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
