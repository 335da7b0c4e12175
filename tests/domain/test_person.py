"""Tests for person identity equality."""

from patient_registry.domain import PersonIdentity


class TestPersonIdentity:
    """Tests for PersonIdentity."""

    def test_same_id_is_equal(self) -> None:
        """Distinct objects with the same person_id are the same person."""
        assert PersonIdentity(5) == PersonIdentity(5)
        assert hash(PersonIdentity(5)) == hash(PersonIdentity(5))

    def test_different_ids_not_equal(self) -> None:
        """Different person ids never compare equal."""
        assert PersonIdentity(5) != PersonIdentity(6)

    def test_unkeyed_identity_equal_only_to_itself(self) -> None:
        """Without a person_id, only the same object is equal."""
        identity = PersonIdentity()

        assert identity == identity
        assert identity != PersonIdentity()
        assert PersonIdentity(5) != PersonIdentity()

    def test_non_identity_comparison(self) -> None:
        """Comparing with another kind of value is not supported."""
        assert PersonIdentity(5).__eq__(5) is NotImplemented
        assert PersonIdentity(5) != 5

    def test_person_id_assignable_later(self) -> None:
        """The key can be assigned after construction."""
        identity = PersonIdentity()
        identity.person_id = 42

        assert identity == PersonIdentity(42)
