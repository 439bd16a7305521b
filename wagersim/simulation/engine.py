# wagersim/simulation/engine.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from wagersim import logs
from wagersim.config.simulation_config import SimulationConfig
from wagersim.simulation.core.bet import Bet
from wagersim.simulation.core.numeric import ceil, ratio, round_half_away
from wagersim.simulation.core.record import Mode, Record, Winner
from wagersim.simulation.genetic import RandomSource, default_random
from wagersim.simulation.result import SimulationResult
from wagersim.simulation.strategy.base import Strategy


class Simulation:
    """
    Simulation (FINAL / FROZEN)

    状态机：
      outside-tournament : 激活资金池 = sum
      inside-tournament  : 激活资金池 = tournament_sum

    每条 record：
      shuffle -> 选 strategy -> bet -> clamp -> 结算 -> 索引原始 record

    不变量：
      - 结算后 sum > 0 且 tournament_sum > 0（<= 0 重置为 floor）
      - characters 只追加，不含 mirror match
      - record_len 只统计非 mirror match

    characters 保存的是内部 record 序列中的位置索引，
    record 本身仍由调用方拥有（不可变，不复制）。
    """

    def __init__(
        self,
        matchmaking_strategy: Optional[Strategy] = None,
        tournament_strategy: Optional[Strategy] = None,
        *,
        config: Optional[SimulationConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        cfg = config or SimulationConfig()

        if rng is None:
            rng = default_random if cfg.seed is None else RandomSource(cfg.seed)

        self._rng = rng
        self._salt_mine_amount = float(cfg.salt_mine_amount)
        self._tournament_balance = float(cfg.tournament_balance)

        self.matchmaking_strategy = matchmaking_strategy
        self.tournament_strategy = tournament_strategy

        self.sum: float = self._salt_mine_amount
        self._tournament_sum: float = self._tournament_balance
        self._in_tournament: bool = False

        self.successes: int = 0
        self.failures: int = 0
        self.record_len: int = 0
        self.max_character_len: int = 0

        # name -> positions in self._records
        self.characters: Dict[str, List[int]] = {}
        self._records: List[Record] = []

    # --------------------------------------------------
    # Read view
    # --------------------------------------------------
    @property
    def tournament_sum(self) -> float:
        return self._tournament_sum

    @property
    def in_tournament(self) -> bool:
        return self._in_tournament

    @property
    def active_sum(self) -> float:
        if self._in_tournament:
            return self._tournament_sum
        return self.sum

    @property
    def floor(self) -> float:
        if self._in_tournament:
            return self._tournament_balance
        return self._salt_mine_amount

    @property
    def records(self) -> Sequence[Record]:
        return self._records

    def matches_for(self, name: str) -> List[Record]:
        return [self._records[i] for i in self.characters.get(name, ())]

    def is_in_mines(self) -> bool:
        """
        floored：激活资金池 <= floor
        """
        return self.active_sum <= self.floor

    def result(self) -> SimulationResult:
        return SimulationResult(
            sum=self.sum,
            tournament_sum=self._tournament_sum,
            in_tournament=self._in_tournament,
            successes=self.successes,
            failures=self.failures,
            record_len=self.record_len,
            max_character_len=self.max_character_len,
            n_characters=len(self.characters),
        )

    # --------------------------------------------------
    # Bet sizing
    # --------------------------------------------------
    def clamp(self, bet_amount: float) -> float:
        pool = self.active_sum

        if self.is_in_mines():
            return pool

        rounded = round_half_away(bet_amount)

        if rounded < 1.0:
            return 1.0

        if rounded > pool:
            return pool

        return rounded

    def pick_winner(self, strategy: Strategy, record: Record) -> Bet:
        if record.is_mirror:
            return Bet.none()

        bet = strategy.bet(self, record.tier, record.left.name, record.right.name)

        if not bet.is_none:
            return bet.with_amount(self.clamp(bet.amount))

        # floored 且 strategy 不下注：随机一侧 all-in
        if self.is_in_mines():
            if self._rng.coin():
                return Bet.left(self.active_sum)
            return Bet.right(self.active_sum)

        return bet

    # --------------------------------------------------
    # State transitions
    # --------------------------------------------------
    def _enter_tournament(self) -> None:
        self._in_tournament = True
        self._tournament_sum = self._tournament_balance

    def _exit_tournament(self) -> None:
        logs.debug(f"[Simulation] tournament exit | tournament_sum={self._tournament_sum:.1f} sum={self.sum:.1f}")
        self._in_tournament = False
        # 只折入 tournament 的净盈亏
        self.sum += self._tournament_sum - self._tournament_balance
        self._tournament_sum = self._tournament_balance

        if self.sum <= 0.0:
            self.sum = self._salt_mine_amount

    def _settle(self, bet: Bet, record: Record) -> None:
        if bet.side is None:
            return

        if bet.side is record.winner:
            if record.winner is Winner.LEFT:
                odds = ratio(record.right.bet_amount, record.left.bet_amount)
            else:
                odds = ratio(record.left.bet_amount, record.right.bet_amount)

            self.successes += 1
            increase = ceil(bet.amount * odds)

        else:
            self.failures += 1
            increase = -bet.amount

        if self._in_tournament:
            self._tournament_sum += increase

            if self._tournament_sum <= 0.0:
                self._tournament_sum = self._tournament_balance

        else:
            self.sum += increase

            if self.sum <= 0.0:
                self.sum = self._salt_mine_amount

    # --------------------------------------------------
    # Per-record processing
    # --------------------------------------------------
    def calculate(self, record: Record) -> None:
        """
        bet + 结算（不做索引）
        """
        record = record.shuffle(self._rng)

        if record.mode is Mode.MATCHMAKING:
            if self._in_tournament:
                self._exit_tournament()

            strategy = self.matchmaking_strategy

        else:
            if not self._in_tournament:
                self._enter_tournament()

            strategy = self.tournament_strategy

        if strategy is None:
            return

        self._settle(self.pick_winner(strategy, record), record)

    def _insert_match(self, name: str, index: int) -> None:
        matches = self.characters.setdefault(name, [])
        matches.append(index)

        if len(matches) > self.max_character_len:
            self.max_character_len = len(matches)

    def insert_record(self, record: Record) -> None:
        if record.is_mirror:
            return

        index = len(self._records)
        self._records.append(record)

        self.record_len += 1
        self._insert_match(record.left.name, index)
        self._insert_match(record.right.name, index)

    # --------------------------------------------------
    # Replay
    # --------------------------------------------------
    @logs.catch(msg="simulation replay failed", log_time=True)
    def simulate(self, records: Iterable[Record]) -> None:
        logs.debug(
            f"[Simulation] replay start | sum={self.sum:.1f} indexed={self.record_len}"
        )
        n = 0

        for record in records:
            self.calculate(record)
            self.insert_record(record)
            n += 1

        if self._in_tournament:
            self._exit_tournament()

        logs.info(
            f"[Simulation] replayed {n} records | sum={self.sum:.1f} "
            f"successes={self.successes} failures={self.failures}"
        )

    def insert_records(self, records: Iterable[Record]) -> None:
        """
        只建立索引，不下注；重复调用会重复追加
        """
        for record in records:
            self.insert_record(record)
