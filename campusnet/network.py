"""The social graph: user profiles, id allocation and directed friendships."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from campusnet.hashtable import IntHashTable
from campusnet.minheap import MinHeap

EDGE_TABLE_SIZE = 101
GROWTH_FACTOR = 5
FIRST_ID = 1


class NetworkError(Exception):
    """Base class for errors raised by the social graph."""


class UnknownUserError(NetworkError, LookupError):
    """Raised when an id does not name a registered user."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"user {user_id} does not exist")
        self.user_id = user_id


class SelfFriendshipError(NetworkError, ValueError):
    """Raised when a user tries to befriend themselves."""

    def __init__(self, user_id: int) -> None:
        super().__init__("you cannot befriend yourself")
        self.user_id = user_id


@dataclass
class Profile:
    """The details a user registers with."""

    name: str
    branch: str
    year: int
    mess: str
    club: str
    sport: str
    id: int = 0


@dataclass
class UserNode:
    """A vertex of the graph.

    ``friends`` holds the ids this user has befriended; ``followers`` holds
    the ids of users who have befriended this user.
    """

    id: int
    profile: Profile
    friends: IntHashTable = field(
        default_factory=lambda: IntHashTable(EDGE_TABLE_SIZE)
    )
    followers: IntHashTable = field(
        default_factory=lambda: IntHashTable(EDGE_TABLE_SIZE)
    )


class SocialGraph:
    """Users stored by id with directed friendship edges.

    New users receive the smallest free id, starting at 1; ids of removed
    users are reused.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"graph size must be positive, got {size}")
        self._slots: list[UserNode | None] = [None] * size
        self._free_ids = MinHeap()
        self._free_ids.push(FIRST_ID)

    @property
    def capacity(self) -> int:
        """Number of id slots currently available."""
        return len(self._slots)

    def resize(self) -> None:
        """Grow the id space to five times its current size."""
        self._slots.extend([None] * (self.capacity * (GROWTH_FACTOR - 1)))

    def add_user(
        self,
        name: str,
        branch: str,
        year: int,
        mess: str,
        club: str,
        sport: str,
    ) -> int:
        """Register a user and return the id they were given."""
        user_id = self._free_ids.peek()
        if user_id >= self.capacity:
            self.resize()
        self._free_ids.pop()
        profile = Profile(
            name=name,
            branch=branch,
            year=year,
            mess=mess,
            club=club,
            sport=sport,
            id=user_id,
        )
        self._slots[user_id] = UserNode(id=user_id, profile=profile)
        if not self._free_ids:
            self._free_ids.push(user_id + 1)
        return user_id

    def remove_user(self, user_id: int) -> None:
        """Delete a user and every friendship edge touching them."""
        node = self.node(user_id)
        for follower in node.followers:
            self.node(follower).friends.remove(user_id)
        for friend in node.friends:
            self.node(friend).followers.remove(user_id)
        self._slots[user_id] = None
        self._free_ids.push(user_id)

    def node(self, user_id: int) -> UserNode:
        """Return the vertex of ``user_id``."""
        if not 0 <= user_id < self.capacity:
            raise UnknownUserError(user_id)
        node = self._slots[user_id]
        if node is None:
            raise UnknownUserError(user_id)
        return node

    def profile(self, user_id: int) -> Profile:
        """Return the editable profile of ``user_id``."""
        return self.node(user_id).profile

    def add_friend(self, user_id: int, other_id: int) -> None:
        """Make ``other_id`` a friend of ``user_id``; repeated calls are harmless."""
        if user_id == other_id:
            raise SelfFriendshipError(user_id)
        node = self.node(user_id)
        other = self.node(other_id)
        if other_id not in node.friends:
            node.friends.add(other_id)
            other.followers.add(user_id)

    def remove_friend(self, user_id: int, other_id: int) -> None:
        """Drop ``other_id`` from the friends of ``user_id`` if present."""
        node = self.node(user_id)
        other = self.node(other_id)
        if other_id in node.friends:
            node.friends.remove(other_id)
            other.followers.remove(user_id)

    def is_friend(self, user_id: int, other_id: int) -> bool:
        """Whether ``other_id`` is in the friend list of ``user_id``."""
        return other_id in self.node(user_id).friends

    def friends(self, user_id: int) -> list[int]:
        """Ids in the friend list of ``user_id``, in table order."""
        return list(self.node(user_id).friends)

    def users(self) -> Iterator[UserNode]:
        """Registered users in id order."""
        return (node for node in self._slots if node is not None)

    def __contains__(self, user_id: object) -> bool:
        if not isinstance(user_id, int) or not 0 <= user_id < self.capacity:
            return False
        return self._slots[user_id] is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.users())

    def __repr__(self) -> str:
        return f"SocialGraph(capacity={self.capacity}, users={len(self)})"