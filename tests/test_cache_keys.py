from thirstee_cache.services.cache_keys import CacheKeys, CacheTTL


def test_builders_are_deterministic():
    assert CacheKeys.user_profile("42") == CacheKeys.user_profile("42")
    assert CacheKeys.event_attendance("e1", "u1") == CacheKeys.event_attendance("e1", "u1")


def test_builders_use_prefix_and_underscore_separator():
    assert CacheKeys.user_profile("42") == "user_profile_42"
    assert CacheKeys.follow_counts("42") == "follow_counts_42"
    assert CacheKeys.user_accessible_events("42") == "accessible_events_42"
    assert CacheKeys.is_following("a", "b") == "is_following_a_b"
    assert CacheKeys.places_predictions("pub", "types=bar") == "places_predictions_pub_types=bar"
    assert CacheKeys.place_details("p1") == "place_details_p1"
    assert CacheKeys.event_attendance("e1", "u1") == "event_attendance_e1_u1"
    assert CacheKeys.navigation_state("/events") == "nav_state_/events"
    assert CacheKeys.PUBLIC_EVENTS == "public_events"


def test_different_parameters_give_different_keys():
    assert CacheKeys.user_profile("1") != CacheKeys.user_profile("2")
    assert CacheKeys.user_profile("1") != CacheKeys.follow_counts("1")
    assert CacheKeys.event_attendance("e1", "u1") != CacheKeys.event_attendance("e1", "u2")


def test_non_string_ids_are_stringified():
    assert CacheKeys.crew_members(7) == "crew_members_7"


def test_prefixes_cover_every_builder_prefix():
    prefixes = CacheKeys.prefixes()
    assert "user_profile_" in prefixes
    assert "event_attendance_" in prefixes
    assert len(prefixes[0]) >= len(prefixes[-1])


def test_ttl_tiers():
    assert CacheTTL.MEDIUM == 300
    assert CacheTTL.SHORT < CacheTTL.MEDIUM < CacheTTL.LONG < CacheTTL.VERY_LONG
    assert CacheTTL.NEGATIVE_RESULT == 60
