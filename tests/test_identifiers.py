import uuid

from user_registry_api.app.core.identifiers import TimeOrderedIdGenerator, uuid7


def test_uuid7_has_version_and_variant():
    value = uuid7()
    assert isinstance(value, uuid.UUID)
    assert value.version == 7
    assert value.variant == uuid.RFC_4122


def test_timestamp_is_embedded_in_the_leading_bits():
    generator = TimeOrderedIdGenerator()
    value = generator(now_ms=1_700_000_000_123)
    assert value.int >> 80 == 1_700_000_000_123


def test_ids_are_strictly_increasing_within_one_millisecond():
    generator = TimeOrderedIdGenerator()
    ids = [generator(now_ms=1_700_000_000_000) for _ in range(5000)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_ids_stay_ordered_when_the_clock_goes_backwards():
    generator = TimeOrderedIdGenerator()
    first = generator(now_ms=1_700_000_000_500)
    second = generator(now_ms=1_700_000_000_100)
    assert second > first


def test_ids_follow_creation_order():
    ids = [uuid7() for _ in range(1000)]
    assert ids == sorted(ids)
