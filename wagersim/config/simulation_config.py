from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SimulationConfig(BaseModel):
    """
    SimulationConfig (FROZEN)

    语义：
      - salt_mine_amount: matchmaking 起始资金，同时也是 matchmaking 的 floor
      - tournament_balance: tournament 起始资金，同时也是 tournament 的 floor
      - seed: None 表示使用进程级 default_random
    """

    salt_mine_amount: float = Field(100.0, ge=1.0)
    tournament_balance: float = Field(1000.0, ge=1.0)
    seed: Optional[int] = None


class GeneticConfig(BaseModel):
    """
    Gene 运算参数（new / choose）
    """

    mutation_rate: float = Field(0.05, ge=0.0, le=1.0)
    seed: Optional[int] = None
