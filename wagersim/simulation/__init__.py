"""
Wager Simulation (FINAL / FROZEN)

Replays a historical sequence of match records through a pluggable
betting strategy and tracks a bankroll that evolves match by match.

Core doctrine:
- Records are immutable historical facts owned by the caller.
- Bankroll state evolves ONLY through Simulation settlement.
- Strategies are read-only interpreters: Simulation -> Bet.
- Genes (Lookup and its sub-enumerations) are values; genetic operators
  never mutate their inputs.

Layer responsibilities:
- core      : defines WHAT a match IS (Record, Bet)
- lookup    : pure statistics over match history, composed into genes
- strategy  : HOW a bet is decided
- engine    : HOW the bankroll evolves (state machine + settlement)

The core performs no IO. Loading records, evolving populations and
ranking strategies are external.
"""
from wagersim.simulation.core.record import Record, Character, Winner, Mode, Tier
from wagersim.simulation.core.bet import Bet
from wagersim.simulation.engine import Simulation
from wagersim.simulation.result import SimulationResult

__all__ = [
    "Record", "Character", "Winner", "Mode", "Tier",
    "Bet",
    "Simulation",
    "SimulationResult",
]
