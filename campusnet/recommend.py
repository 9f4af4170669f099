"""Friend recommendations: shared interests for newcomers, nearby users otherwise."""

from __future__ import annotations

import enum
import random
from collections import deque
from dataclasses import dataclass, field
from itertools import groupby
from typing import Hashable, Iterable, Iterator, Sequence, TypeVar

from campusnet.network import Profile, SocialGraph

SIMILAR_LIMIT = 10

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class Candidate:
    """A user reached by the breadth-first search, with its distance from the start."""

    user_id: int
    level: int

    def __str__(self) -> str:
        return f"{self.user_id} {self.level}"


class RecommendationKind(enum.Enum):
    """How a list of recommendations was produced."""

    SIMILAR_INTERESTS = "similar-interests"
    FRIENDS_OF_FRIENDS = "friends-of-friends"


@dataclass
class Recommendations:
    """Recommended user ids, best first, and the method that chose them."""

    kind: RecommendationKind
    user_ids: list[int] = field(default_factory=list)

    def __iter__(self) -> Iterator[int]:
        return iter(self.user_ids)

    def __len__(self) -> int:
        return len(self.user_ids)


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")


def similarity_score(profile: Profile, other: Profile) -> int:
    """Count the matching year, branch, mess, club and sport of two profiles."""
    return sum(
        (
            profile.year == other.year,
            profile.branch == other.branch,
            profile.mess == other.mess,
            profile.club == other.club,
            profile.sport == other.sport,
        )
    )


def sort_by_score(scored: Iterable[tuple[T, int]]) -> list[tuple[T, int]]:
    """Return ``(item, score)`` pairs in ascending score order, keeping ties in place."""
    return sorted(scored, key=lambda pair: pair[1])


def similar_users(graph: SocialGraph, user_id: int, limit: int) -> list[int]:
    """Ids of the users sharing most interests with ``user_id``, best first.

    Ties go to the user with the higher id.
    """
    _check_limit(limit)
    me = graph.profile(user_id)
    scored = [
        (node.id, similarity_score(me, node.profile))
        for node in graph.users()
        if node.id != user_id
    ]
    ranked = reversed(sort_by_score(scored))
    return [uid for uid, _ in ranked][:limit]


def nearby_candidates(graph: SocialGraph, user_id: int, limit: int) -> list[Candidate]:
    """Users reachable along friendship edges who are not yet friends, nearest first."""
    _check_limit(limit)
    graph.node(user_id)
    seen = {user_id}
    queue: deque[Candidate] = deque([Candidate(user_id, 0)])
    found: list[Candidate] = []
    while queue:
        current = queue.popleft()
        for neighbour in graph.friends(current.user_id):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(Candidate(neighbour, current.level + 1))
        if len(found) == limit:
            break
        if current.user_id != user_id and not graph.is_friend(
            user_id, current.user_id
        ):
            found.append(current)
    return found


def shuffle_levels(
    candidates: Sequence[Candidate], rng: random.Random | None = None
) -> list[Candidate]:
    """Shuffle each run of candidates at the same level, keeping runs in order."""
    rng = rng or random.Random()
    result: list[Candidate] = []
    for _, run in groupby(candidates, key=lambda c: c.level):
        group = list(run)
        rng.shuffle(group)
        result.extend(group)
    return result


def friends_of_friends(
    graph: SocialGraph,
    user_id: int,
    limit: int,
    rng: random.Random | None = None,
) -> list[int]:
    """Up to ``limit`` nearby non-friends, nearest first, random within a distance."""
    candidates = nearby_candidates(graph, user_id, limit)
    return [c.user_id for c in shuffle_levels(candidates, rng)]


def recommend_friends(
    graph: SocialGraph,
    user_id: int,
    limit: int,
    rng: random.Random | None = None,
) -> Recommendations:
    """Recommend friends for ``user_id``.

    A user without friends gets the top ten users by shared interests;
    anyone else gets up to ``limit`` friends of friends.
    """
    _check_limit(limit)
    if not graph.friends(user_id):
        return Recommendations(
            RecommendationKind.SIMILAR_INTERESTS,
            similar_users(graph, user_id, SIMILAR_LIMIT),
        )
    return Recommendations(
        RecommendationKind.FRIENDS_OF_FRIENDS,
        friends_of_friends(graph, user_id, limit, rng),
    )