"""
Shared fixtures: sample cards, a scriptable card source and a manual scheduler.
"""

import asyncio
from typing import List, Optional

import pytest

from hs_card_catalog.exceptions import FetchFailure
from hs_card_catalog.interfaces.card_source import ICardSource
from hs_card_catalog.interfaces.scheduler import IScheduler
from hs_card_catalog.models.card import Card


def make_card(name: str, set: str = "CORE", type: str = "SPELL", card_class: str = "MAGE",
              cost: Optional[int] = 1, **extra) -> Card:
    """Helper to create a test card"""
    return Card(name=name, set=set, type=type, card_class=card_class, cost=cost, **extra)


class FakeCardSource(ICardSource):
    """
    Card source that returns queued results in order.

    Each queued item is either a list of cards or an exception to raise. When
    a gate is set, fetches wait on it so tests can observe in-flight refreshes.
    """

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0
        self.gate: Optional[asyncio.Event] = None

    async def fetch_cards(self) -> List[Card]:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.pop(0) if self.results else FetchFailure("no more results queued")
        if isinstance(result, Exception):
            raise result
        return list(result)


class ManualScheduler(IScheduler):
    """Records jobs instead of running them; tests trigger them explicitly."""

    def __init__(self):
        self.immediate = []
        self.periodic = []
        self.shut_down = False

    def run_now(self, job):
        self.immediate.append(job)

    def run_every(self, interval_seconds, job):
        self.periodic.append((interval_seconds, job))

    async def shutdown(self):
        self.shut_down = True

    async def run_pending(self):
        """Run the immediate jobs once, as the real scheduler would at startup."""
        jobs, self.immediate = self.immediate, []
        for job in jobs:
            await job()

    async def tick(self):
        """Run every periodic job once, as if their interval had elapsed."""
        for _, job in self.periodic:
            await job()


@pytest.fixture
def fireball():
    return make_card("Fireball", cost=4, rarity="FREE", text="Deal 6 damage.")


@pytest.fixture
def frostbolt():
    return make_card("Frostbolt", cost=2, rarity="FREE")


@pytest.fixture
def sample_cards(fireball, frostbolt):
    """A small catalog covering several sets, types, classes and costs."""
    return (
        fireball,
        frostbolt,
        make_card("Alexstrasza", set="EXPERT1", type="MINION", card_class="NEUTRAL", cost=9,
                  rarity="LEGENDARY"),
        make_card("Deathwing, Dragonlord", set="GVG", type="MINION", card_class="NEUTRAL", cost=10,
                  rarity="LEGENDARY"),
        make_card("Twilight Dragon", set="EXPERT1", type="MINION", card_class="NEUTRAL", cost=4),
        make_card("Flamestrike", set="CORE", type="SPELL", card_class="MAGE", cost=7),
        make_card("Mountain Giant", set="EXPERT1", type="MINION", card_class="NEUTRAL", cost=12),
        make_card("Arcane Intellect", set="CORE", type="SPELL", card_class="MAGE", cost=3),
        make_card("Ysera", set="EXPERT1", type="MINION", card_class="DREAM", cost=9),
        make_card("Unclassified Relic", set="", type="WEAPON", card_class=None, cost=3),
    )


@pytest.fixture
def manual_scheduler():
    return ManualScheduler()
