"""
Arena script for running self-play matches between Cathedral computer players.
"""

import os
import sys
import json
import time
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.gameplay_protocol import ComputerProtocol
from agents.random_agent import RandomComputer
from cathedral.board import Owner
from cathedral.game import CathedralGame, GameSettings
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


class ArenaMatch:
    """
    Represents a single match between two computer players.
    """

    def __init__(self, settings: GameSettings, seed: Optional[int] = None):
        """
        Initialize match.

        Args:
            settings: Rule settings for the game
            seed: Seed for the light player; dark uses seed + 1
        """
        self.game = CathedralGame(settings)
        self.players: Dict[Owner, ComputerProtocol] = {
            Owner.LIGHT: RandomComputer(self.game, Owner.LIGHT, seed=seed),
            Owner.DARK: RandomComputer(self.game, Owner.DARK, seed=None if seed is None else seed + 1),
        }
        self.game_duration = 0.0

    def play_match(self) -> Dict[str, Any]:
        """
        Play a complete match.

        Returns:
            Match results dictionary
        """
        start_time = time.time()
        church_proxy = self.players[Owner.DARK]

        while not self.game.is_over:
            owner = self.game.next_turn
            player = church_proxy if owner is Owner.CHURCH else self.players[owner]
            piece = player.next_move()
            claimed, destroyed = self.game.place_piece(piece)
            if claimed or destroyed:
                logger.debug(f"{piece} claimed {len(claimed)} tiles, destroyed {len(destroyed)} pieces")

        self.game_duration = time.time() - start_time
        result = self.game.calculate_winner()
        return {
            "winner": result.winner.name if result and result.winner else None,
            "score": result.score if result else 0,
            "scores": {owner.name: score for owner, score in self.game.scores().items()},
            "moves": len(self.game.build_history),
            "duration": self.game_duration,
            "log": self.game.log,
        }


def run_arena(games: int, seed: Optional[int], settings: GameSettings,
              log_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Run several matches and summarize the outcomes."""
    results: List[Dict[str, Any]] = []
    for i in range(games):
        match_seed = None if seed is None else seed + 2 * i
        result = ArenaMatch(settings, seed=match_seed).play_match()
        results.append(result)
        logger.info(f"Game {i + 1}/{games}: winner={result['winner'] or 'tie'} "
                    f"score={result['score']} moves={result['moves']} "
                    f"duration={result['duration']:.2f}s")
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            (log_dir / f"game_{i + 1}.log").write_text(result["log"] + "\n", encoding="utf-8")

    wins = {owner.name: sum(1 for r in results if r["winner"] == owner.name)
            for owner in (Owner.LIGHT, Owner.DARK)}
    return {
        "games": games,
        "wins": wins,
        "ties": sum(1 for r in results if r["winner"] is None),
        "average_moves": sum(r["moves"] for r in results) / games if games else 0.0,
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play random Cathedral games")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument("--delayed-cathedral", action="store_true",
                        help="Church builds after both opening pieces")
    parser.add_argument("--log-dir", type=Path, default=None,
                        help="Directory to write each game's move log")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    log_file = args.log_dir / "arena.log" if args.log_dir is not None else None
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=log_file)
    settings = GameSettings(delayed_cathedral=args.delayed_cathedral)
    summary = run_arena(args.games, args.seed, settings, args.log_dir)
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
