"""Baseball elimination decided by maximum flow."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from graphalgo.maxflow import max_flow


@dataclass(frozen=True)
class Team:
    """A team's record; ``games[j]`` counts games left against team ``j``."""

    name: str
    wins: int
    losses: int
    remaining: int
    games: tuple[int, ...]


@dataclass(frozen=True)
class Elimination:
    """A team that cannot win, with the subset of teams that proves it."""

    team: Team
    certificate: tuple[Team, ...]
    total_wins: int
    games_among: int

    @property
    def average(self) -> float:
        """Wins per certificate team once their games among themselves are played."""
        return (self.total_wins + self.games_among) / len(self.certificate)


def _elimination(teams: Sequence[Team], x: int, members: list[int]) -> Elimination:
    total_wins = sum(teams[i].wins for i in members)
    games_among = sum(
        teams[i].games[j] for pos, i in enumerate(members) for j in members[pos + 1:]
    )
    return Elimination(
        teams[x], tuple(teams[i] for i in members), total_wins, games_among
    )


def eliminated_teams(teams: Sequence[Team]) -> list[Elimination]:
    """Every eliminated team, in input order, each with its certificate."""
    n = len(teams)
    if n == 0:
        return []
    pairs = [(i, j) for i in range(n) for j in range(i + 1, n)]
    size = n + len(pairs) + 2
    source, sink = size - 2, size - 1
    leader = max(range(n), key=lambda i: teams[i].wins)
    result: list[Elimination] = []

    for x, team in enumerate(teams):
        best = team.wins + team.remaining
        if best < teams[leader].wins:
            result.append(_elimination(teams, x, [leader]))
            continue

        adj: list[list[tuple[int, float]]] = [[] for _ in range(size)]
        for i, other in enumerate(teams):
            if i != x:
                adj[i].append((sink, best - other.wins))
        needed = 0
        for node, (i, j) in enumerate(pairs, start=n):
            if x not in (i, j):
                count = teams[i].games[j]
                adj[source].append((node, count))
                adj[node].append((i, math.inf))
                adj[node].append((j, math.inf))
                needed += count

        flow = max_flow(adj, source, sink)
        if flow.value < needed:
            members = [i for i in range(n) if i in flow.reachable]
            result.append(_elimination(teams, x, members))
    return result


def join_names(names: Sequence[str]) -> str:
    """Join names as ``A, B and C``."""
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


def format_elimination(elimination: Elimination) -> str:
    """The report explaining why a team is eliminated, ending in a blank line."""
    team = elimination.team
    count = len(elimination.certificate)
    verb = "has" if count == 1 else "have"
    names = join_names([t.name for t in elimination.certificate])
    return (
        f"{team.name} is eliminated.\n"
        f"They can win at most {team.wins} + {team.remaining} = "
        f"{team.wins + team.remaining} games.\n"
        f"{names} {verb} won a total of {elimination.total_wins} games.\n"
        f"They play each other {elimination.games_among} times.\n"
        f"So on average, each of the teams wins "
        f"{elimination.total_wins + elimination.games_among}/{count} = "
        f"{elimination.average:g} games.\n\n"
    )


def parse_division(text: str) -> list[Team]:
    """Read a team count, then per team: name, wins, losses, remaining, games."""
    tokens = iter(text.split())
    try:
        n = int(next(tokens))
        teams = []
        for _ in range(n):
            name = next(tokens)
            wins, losses, remaining = (int(next(tokens)) for _ in range(3))
            games = tuple(int(next(tokens)) for _ in range(n))
            teams.append(Team(name, wins, losses, remaining, games))
    except StopIteration:
        raise ValueError("division data ends too early") from None
    return teams


def main(argv: Sequence[str] | None = None) -> int:
    """Print an elimination report for every eliminated team."""
    parser = argparse.ArgumentParser(description="Decide baseball elimination.")
    parser.add_argument("path", nargs="?", help="division file (default: stdin)")
    args = parser.parse_args(argv)
    if args.path is None:
        text = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    try:
        teams = parse_division(text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for elimination in eliminated_teams(teams):
        sys.stdout.write(format_elimination(elimination))
    return 0