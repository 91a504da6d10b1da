#!/usr/bin/env python3
"""
Performance benchmark for the simulation core.

Usage:
    python benchmark.py                    # Standard 5-second run per ruleset
    python benchmark.py --quick            # Quick 1-second test
    python benchmark.py --seed 7           # Reproducible run
    python benchmark.py --save results.json # Save results to file

Example output:
    Ruleset: advanced | Ticks: 412,345 | Time: 5.00s | Ticks/sec: 82,469
    Sessions: 3 | Kills: 1,021 | Max particles: 180
"""

import argparse
import json
import platform
import time
from dataclasses import dataclass, asdict
from typing import List, Optional

from config import Config
from src.game import AlienInvasion, Autopilot, GamePhase


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""
    ruleset: str
    total_ticks: int
    total_time: float
    ticks_per_sec: float
    sessions: int
    kills: int
    max_aliens: int
    max_particles: int


def run_benchmark(ruleset: str, duration: float, seed: Optional[int] = None) -> BenchmarkResult:
    """Drive the autopilot for `duration` seconds and count ticks."""
    config = Config.for_ruleset(ruleset)
    game = AlienInvasion(config, seed=seed)
    pilot = Autopilot(config)
    game.start()

    ticks = 0
    sessions = 1
    kills = 0
    max_aliens = 0
    max_particles = 0

    start = time.perf_counter()
    deadline = start + duration
    while time.perf_counter() < deadline:
        for _ in range(100):
            if game.phase is GamePhase.GAME_OVER:
                game.restart()
                sessions += 1
            _, events = game.step(pilot.act(game.get_state()))
            kills += events.kills
            max_aliens = max(max_aliens, len(game.state.aliens))
            max_particles = max(max_particles, len(game.state.particles))
            ticks += 1
    elapsed = time.perf_counter() - start

    return BenchmarkResult(
        ruleset=ruleset,
        total_ticks=ticks,
        total_time=elapsed,
        ticks_per_sec=ticks / elapsed if elapsed > 0 else 0.0,
        sessions=sessions,
        kills=kills,
        max_aliens=max_aliens,
        max_particles=max_particles,
    )


def print_result(result: BenchmarkResult) -> None:
    print(f"Ruleset: {result.ruleset} | Ticks: {result.total_ticks:,} | "
          f"Time: {result.total_time:.2f}s | Ticks/sec: {result.ticks_per_sec:,.0f}")
    print(f"Sessions: {result.sessions} | Kills: {result.kills:,} | "
          f"Max aliens: {result.max_aliens} | Max particles: {result.max_particles}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark the Alien Invasion tick loop")
    parser.add_argument('--quick', action='store_true', help='1-second run per ruleset')
    parser.add_argument('--duration', type=float, default=5.0, help='Seconds per ruleset')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--save', type=str, default=None, help='Write results as JSON')
    args = parser.parse_args()

    duration = 1.0 if args.quick else args.duration

    print("=" * 60)
    print(f"Alien Invasion benchmark ({platform.python_implementation()} {platform.python_version()})")
    print("=" * 60)

    results: List[BenchmarkResult] = []
    for ruleset in ('advanced', 'simple'):
        result = run_benchmark(ruleset, duration, seed=args.seed)
        print_result(result)
        results.append(result)

    if args.save:
        with open(args.save, 'w') as f:
            json.dump([asdict(r) for r in results], f, indent=2)
        print(f"\nSaved results to {args.save}")


if __name__ == "__main__":
    main()
