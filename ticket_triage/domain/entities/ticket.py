"""Ticket entity: a support request awaiting triage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ticket:
    title: str
    description: str
