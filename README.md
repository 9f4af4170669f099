# campusnet

campusnet is a small social network for a campus. Students register with a
profile made up of a name, an academic year, a branch, a club, a mess and a
sport. They can then befriend one another, drop friends, check whether someone
is a friend and ask for friend recommendations.

Friendships are directed. When Alice befriends Bob, Bob is on Alice's friend
list, but Alice is on Bob's list only if Bob also befriends her.

Recommendations work in two ways:

- A user with no friends yet is compared with everyone else by how many
  profile fields they share (year, branch, mess, club, sport). The ten
  closest matches are returned, best first. When two users have the same
  score, the one with the higher ID comes first.
- A user with friends gets users reachable through the friendship edges who
  are not yet friends, nearest first, up to the requested number. Within each
  distance the order is shuffled.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## The console

```
campusnet
```

Pass `--seed N` to make the shuffling of recommendations repeatable.

The program starts on the home page, which offers `register`, `login` and
`quit`. Each new account gets the lowest free numeric ID, starting at 1, and
IDs of deleted accounts are reused. You log in with your ID. The menu then
offers `recommendations`, `friends`, `profile`, `unregister` and `logout`:

- `recommendations` asks how many you want, lists them, and opens a submenu
  with `befriend` and `back`.
- `friends` lists your friends and opens a submenu with `unfriend`,
  `check-status` and `back`.
- `profile` shows your details and opens a submenu with `modify` and `back`.
  `modify` lets you change `name`, `year`, `branch`, `club`, `mess` or
  `sport`.
- `unregister` deletes your account and every friendship that involves it.

Input is read one word at a time, so names and other fields must not contain
spaces. The session ends on `quit` or at the end of input.

## As a library

```python
import random

from campusnet.network import SocialGraph
from campusnet.recommend import recommend_friends

graph = SocialGraph(1000)
alice = graph.add_user("Alice", "CSE", 2, "North", "Programming", "Chess")
bob = graph.add_user("Bob", "CSE", 2, "South", "Gaming", "Chess")
carol = graph.add_user("Carol", "ECE", 3, "North", "ERC", "Tennis")

graph.add_friend(alice, bob)
graph.add_friend(bob, carol)
print(graph.is_friend(alice, bob))   # True
print(graph.is_friend(bob, alice))   # False: friendships are one-way

result = recommend_friends(graph, alice, 5, random.Random(0))
print(result.kind)                   # RecommendationKind.FRIENDS_OF_FRIENDS
for user_id in result:
    print(user_id, graph.profile(user_id).name)
```

`SocialGraph` also offers `remove_user`, `remove_friend`, `friends`, `users`,
`node` and `profile`. An ID that names no user raises `UnknownUserError`. A
user befriending themselves raises `SelfFriendshipError`. Both derive from
`NetworkError`.

`campusnet.recommend` exposes the steps separately: `similarity_score`,
`sort_by_score`, `similar_users`, `nearby_candidates`, `shuffle_levels` and
`friends_of_friends`.

The package also provides these data structures:

- `campusnet.hashtable.IntHashTable`: a set of integers with separate
  chaining. It holds each user's friend and follower lists.
- `campusnet.minheap.MinHeap`: a binary min-heap. It tracks the free user
  IDs.
- `campusnet.bst.BinarySearchTree` and `campusnet.bst.random_bst`: a binary
  search tree of distinct integers.
- `campusnet.linkedlist.IntList`: an ordered list of integers without
  duplicates.

## What it does not do

All data lives in memory. Nothing is saved, so closing the console loses
every account and friendship. There is no password or other authentication:
anyone who knows an ID can log in with it. There is also no networking; the
console is a single local session.

## Running the tests

```
pytest
```