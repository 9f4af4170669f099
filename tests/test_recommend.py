import random

import pytest

from campusnet.network import Profile, SocialGraph, UnknownUserError
from campusnet.recommend import (
    Candidate,
    RecommendationKind,
    friends_of_friends,
    nearby_candidates,
    recommend_friends,
    shuffle_levels,
    similar_users,
    similarity_score,
    sort_by_score,
)


@pytest.fixture
def sample_graph():
    graph = SocialGraph(100)
    graph.add_user("Aman", "A", 2, "AM", "AC", "AS")
    graph.add_user("Bman", "B", 2, "AM", "AC", "AS")
    graph.add_user("Cman", "C", 12, "M", "AC", "AS")
    graph.add_user("Dman", "A", 2, "A", "AC", "AS")
    graph.add_user("Eman", "B", 2, "BM", "BC", "BS")
    graph.add_user("Fman", "C", 1, "C", "CC", "CS")
    graph.add_user("Gman", "D", 22, "M", "DC", "DS")
    graph.add_user("Hman", "E", 1, "E", "EC", "ES")
    graph.add_user("iman", "F", 2, "FM", "FC", "FS")
    return graph


@pytest.fixture
def chain_graph():
    graph = SocialGraph(20)
    for n in range(7):
        graph.add_user(f"u{n + 1}", "B", 1, "M", "C", "S")
    graph.add_friend(1, 2)
    graph.add_friend(2, 3)
    graph.add_friend(3, 4)
    graph.add_friend(1, 5)
    graph.add_friend(5, 6)
    graph.add_friend(7, 1)
    return graph


def test_similarity_score_counts_shared_fields():
    a = Profile("Aman", "A", 2, "AM", "AC", "AS")
    b = Profile("Bman", "B", 2, "AM", "AC", "AS")
    assert similarity_score(a, b) == 4
    assert similarity_score(a, a) == 5


def test_similarity_score_no_match():
    a = Profile("Aman", "A", 2, "AM", "AC", "AS")
    f = Profile("Fman", "C", 1, "C", "CC", "CS")
    assert similarity_score(a, f) == 0


def test_sort_by_score_source_case():
    scored = [(455, 3), (584, 7), (934, 2), (842, 9), (201, 0)]
    assert [item for item, _ in sort_by_score(scored)] == [201, 934, 455, 584, 842]


def test_sort_by_score_is_stable():
    scored = [("a", 1), ("b", 0), ("c", 1), ("d", 0)]
    assert sort_by_score(scored) == [("b", 0), ("d", 0), ("a", 1), ("c", 1)]


def test_similar_users_order(sample_graph):
    assert similar_users(sample_graph, 1, 10) == [4, 2, 3, 9, 5, 8, 7, 6]


def test_similar_users_limit(sample_graph):
    assert similar_users(sample_graph, 1, 3) == [4, 2, 3]


def test_similar_users_only_user():
    graph = SocialGraph(10)
    uid = graph.add_user("Solo", "A", 1, "M", "C", "S")
    assert similar_users(graph, uid, 10) == []


def test_similar_users_unknown(sample_graph):
    with pytest.raises(UnknownUserError):
        similar_users(sample_graph, 42, 10)


def test_similar_users_negative_limit(sample_graph):
    with pytest.raises(ValueError):
        similar_users(sample_graph, 1, -1)


def test_nearby_candidates_bfs(chain_graph):
    assert nearby_candidates(chain_graph, 1, 10) == [
        Candidate(3, 2),
        Candidate(6, 2),
        Candidate(4, 3),
    ]


def test_nearby_candidates_limit(chain_graph):
    assert [c.user_id for c in nearby_candidates(chain_graph, 1, 2)] == [3, 6]
    assert nearby_candidates(chain_graph, 1, 0) == []


def test_nearby_candidates_ignores_followers(chain_graph):
    found = {c.user_id for c in nearby_candidates(chain_graph, 1, 10)}
    assert 7 not in found
    assert 1 not in found


def test_candidate_str():
    assert str(Candidate(3, 2)) == "3 2"


def test_shuffle_levels_keeps_level_groups():
    candidates = [Candidate(i, 2) for i in range(5)] + [
        Candidate(i, 3) for i in range(5, 9)
    ]
    original = list(candidates)
    shuffled = shuffle_levels(candidates, random.Random(7))
    assert candidates == original
    assert [c.level for c in shuffled] == [2] * 5 + [3] * 4
    assert {c.user_id for c in shuffled[:5]} == set(range(5))
    assert {c.user_id for c in shuffled[5:]} == set(range(5, 9))


def test_shuffle_levels_empty():
    assert shuffle_levels([], random.Random(1)) == []


def test_friends_of_friends(chain_graph):
    result = friends_of_friends(chain_graph, 1, 10, random.Random(3))
    assert set(result[:2]) == {3, 6}
    assert result[2] == 4


def test_recommend_friends_new_user(sample_graph):
    recs = recommend_friends(sample_graph, 1, 4, random.Random(0))
    assert recs.kind is RecommendationKind.SIMILAR_INTERESTS
    assert list(recs) == [4, 2, 3, 9, 5, 8, 7, 6]


def test_recommend_friends_similar_capped_at_ten():
    graph = SocialGraph(50)
    for n in range(13):
        graph.add_user(f"u{n}", "B", 1, "M", "C", "S")
    recs = recommend_friends(graph, 1, 3, random.Random(0))
    assert recs.kind is RecommendationKind.SIMILAR_INTERESTS
    assert len(recs) == 10
    assert list(recs) == list(range(13, 3, -1))


def test_recommend_friends_old_user(chain_graph):
    recs = recommend_friends(chain_graph, 1, 10, random.Random(0))
    assert recs.kind is RecommendationKind.FRIENDS_OF_FRIENDS
    assert sorted(recs) == [3, 4, 6]


def test_recommend_friends_unknown(chain_graph):
    with pytest.raises(UnknownUserError):
        recommend_friends(chain_graph, 15, 3, random.Random(0))