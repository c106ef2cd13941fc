"""Ordered, human-readable record of every quantity the engine computes.

One trace is created per ``calculate()`` call and handed to each calculator
in turn. Lines are kept in the order they were recorded; nothing is ever
reordered, merged or dropped. The report renderer receives them verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger


@dataclass
class CalcTrace:
    lines: list[str] = field(default_factory=list)

    def add(self, line: str) -> None:
        self.lines.append(line)
        logger.debug(line)

    def value(self, label: str, symbol: str, value: float, units: str = "", fmt: str = ".3f") -> None:
        """Record ``label: symbol = value units``."""
        text = f"{label}: {symbol} = {value:{fmt}}"
        self.add(f"{text} {units}" if units else text)

    def note(self, text: str) -> None:
        self.add(f"NOTE: {text}")

    def section(self, title: str) -> None:
        self.add(f"--- {title} ---")

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
