from __future__ import annotations

import random
from collections import Counter
from typing import Dict, List, Optional

from connect5.ai.base import Agent
from connect5.ai.opponent_policy import OPPONENT_RULES, OpponentPolicy
from connect5.ai.random_agent import RandomAgent
from connect5.game.controller import TurnController
from connect5.game.scheduler import ManualScheduler
from connect5.game.state import Phase
from connect5.types import PLAYER


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(human: Agent, human_goes_first: bool, seed: int = 0) -> Dict[str, object]:
    """
    Play one game through the controller's public interface: `human` answers
    on PLAYER_TO_MOVE, the opponent's scheduled deliberation is run at once.
    """
    scheduler = ManualScheduler()
    policy = OpponentPolicy()
    ctl = TurnController(policy=policy, scheduler=scheduler, think_delay=0.0)
    seed_agent(human, seed)

    rules: Counter = Counter()
    opp_ms = 0
    ctl.configure_sides(human_goes_first)

    while ctl.phase is not Phase.FINISHED:
        if ctl.phase is Phase.OPPONENT_TO_MOVE:
            scheduler.run_pending()
            rules[policy.last_info.get("rule")] += 1
            opp_ms += int(policy.last_info.get("time_ms", 0))
            continue

        column = human.choose_move(ctl.session.lattice, PLAYER)
        if column is None or ctl.request_placement(column) is None:
            raise RuntimeError(f"{human.name} produced an unplayable move: {column}")

    session = ctl.session
    row: Dict[str, object] = {
        "seed": seed,
        "human": human.name,
        "human_first": human_goes_first,
        "outcome": session.outcome,
        "moves": session.moves,
        "line_kind": session.winning_line.kind if session.winning_line is not None else None,
        "opp_time_ms": opp_ms,
    }
    for rule in OPPONENT_RULES:
        row[f"rule_{rule}"] = rules.get(rule, 0)
    return row


def simulate(games: int = 50, seed: int = 0, human: Optional[Agent] = None) -> List[Dict[str, object]]:
    """Alternate who moves first; one result row per game."""
    stand_in = human if human is not None else RandomAgent()
    rows = []
    for g in range(games):
        rows.append(play_headless(stand_in, human_goes_first=(g % 2 == 0), seed=seed + g))
    return rows
