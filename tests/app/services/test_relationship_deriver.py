"""Testes da derivação de relacionamentos."""

from __future__ import annotations

from app.domain.relationships import RelationshipResult
from app.domain.user_record import UserRecord
from app.services import derive, membership_set


def _records(*usernames: str) -> list[UserRecord]:
    return [UserRecord(username=u) for u in usernames]


def _names(records: tuple[UserRecord, ...]) -> list[str]:
    return [r.username for r in records]


class TestDeriveCore:
    """followers x following."""

    def test_basic_sets(self) -> None:
        """Exemplo canônico a,b,c / b,c,d."""
        result = derive(_records("a", "b", "c"), _records("b", "c", "d"))

        assert _names(result.non_reciprocal_following) == ["d"]
        assert _names(result.non_reciprocal_followers) == ["a"]
        assert _names(result.mutuals) == ["b", "c"]
        assert result.verified_pending == ()
        assert result.reconfirmed_unfollows == ()
        assert result.blocked_passthrough == ()

    def test_order_follows_source_list(self) -> None:
        """Cada conjunto preserva a ordem da lista iterada."""
        result = derive(_records("z", "y", "x"), _records("x", "q", "y", "p"))

        assert _names(result.non_reciprocal_following) == ["q", "p"]
        assert _names(result.mutuals) == ["x", "y"]
        assert _names(result.non_reciprocal_followers) == ["z"]

    def test_mutuals_carry_following_metadata(self) -> None:
        """Mútuos vêm de following, com URL/timestamp de following."""
        followers = [UserRecord("a", profile_url="from-followers", captured_at=1)]
        following = [UserRecord("a", profile_url="from-following", captured_at=2)]

        result = derive(followers, following)

        assert result.mutuals == (UserRecord("a", "from-following", 2),)

    def test_partition_of_following(self) -> None:
        """following = não-recíprocos ∪ mútuos, sem interseção."""
        following = _records("a", "b", "c", "d", "e")
        result = derive(_records("b", "d", "x"), following)

        nrf = set(_names(result.non_reciprocal_following))
        mutuals = set(_names(result.mutuals))
        assert nrf | mutuals == {"a", "b", "c", "d", "e"}
        assert not nrf & mutuals

    def test_empty_lists(self) -> None:
        """Listas vazias produzem resultado vazio."""
        result = derive([], [])
        assert result == RelationshipResult()
        assert result.is_empty()

    def test_none_equivalent_to_empty(self) -> None:
        """None e lista vazia são equivalentes em todas as posições."""
        followers = _records("a")
        following = _records("a", "b")
        assert derive(followers, following) == derive(
            followers, following, pending=[], blocked=[], unfollowed=[]
        )
        assert derive(None, None) == derive([], [])

    def test_idempotent(self) -> None:
        """Mesma entrada, mesmo resultado."""
        followers = _records("a", "b")
        following = _records("b", "c")
        assert derive(followers, following) == derive(followers, following)

    def test_accepts_generators(self) -> None:
        """Iteráveis de uso único são consumidos uma vez só."""
        result = derive(
            (r for r in _records("a", "b")),
            (r for r in _records("b", "c")),
        )
        assert _names(result.mutuals) == ["b"]
        assert _names(result.non_reciprocal_followers) == ["a"]


class TestDeriveOptionalLists:
    """pending, blocked e unfollowed."""

    def test_verified_pending(self) -> None:
        """Pendentes só valem se ainda estão em following."""
        result = derive(
            _records("a"), _records("b", "d"), pending=_records("d", "x")
        )
        assert _names(result.verified_pending) == ["d"]

    def test_reconfirmed_unfollows(self) -> None:
        """Unfollowed confirmados contra following, na ordem de unfollowed."""
        result = derive(
            _records(),
            _records("m", "n", "o"),
            unfollowed=_records("o", "zz", "m"),
        )
        assert _names(result.reconfirmed_unfollows) == ["o", "m"]

    def test_blocked_passthrough_unchanged(self) -> None:
        """Bloqueados são repassados sem filtro."""
        blocked = [UserRecord("x", "u", 3), UserRecord("a")]
        result = derive(_records("a"), _records("a"), blocked=blocked)
        assert result.blocked_passthrough == tuple(blocked)


class TestMembershipSet:
    """membership_set."""

    def test_usernames_only(self) -> None:
        assert membership_set(_records("a", "b", "a")) == frozenset({"a", "b"})

    def test_empty(self) -> None:
        assert membership_set([]) == frozenset()
