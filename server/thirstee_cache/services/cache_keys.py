"""Canonical cache keys and TTL tiers.

Every call site builds keys through `CacheKeys` so that independent callers
agree on what counts as the same cached item, and so the invalidators can
find related entries by prefix.
"""


def _key(prefix: str, *parts) -> str:
    return "_".join([prefix, *(str(part) for part in parts)])


class CacheKeys:
    """Key builders, one per cached entity type."""

    PUBLIC_EVENTS = "public_events"

    # Users and follows
    @staticmethod
    def user_profile(user_id: str) -> str:
        return _key("user_profile", user_id)

    @staticmethod
    def follow_counts(user_id: str) -> str:
        return _key("follow_counts", user_id)

    @staticmethod
    def is_following(follower_id: str, following_id: str) -> str:
        return _key("is_following", follower_id, following_id)

    @staticmethod
    def user_notifications(user_id: str) -> str:
        return _key("user_notifications", user_id)

    @staticmethod
    def unread_count(user_id: str) -> str:
        return _key("unread_count", user_id)

    # Events
    @staticmethod
    def my_events(user_id: str) -> str:
        return _key("my_events", user_id)

    @staticmethod
    def user_accessible_events(user_id: str) -> str:
        return _key("accessible_events", user_id)

    @staticmethod
    def event_detail(event_id: str) -> str:
        return _key("event_detail", event_id)

    @staticmethod
    def event_attendance(event_id: str, user_id: str) -> str:
        return _key("event_attendance", event_id, user_id)

    @staticmethod
    def event_ratings(event_id: str) -> str:
        return _key("event_ratings", event_id)

    @staticmethod
    def user_event_rating(event_id: str, user_id: str) -> str:
        return _key("user_event_rating", event_id, user_id)

    @staticmethod
    def discover_events(filters: str) -> str:
        return _key("discover_events", filters)

    # Crews
    @staticmethod
    def crew_details(crew_id: str) -> str:
        return _key("crew_details", crew_id)

    @staticmethod
    def crew_members(crew_id: str) -> str:
        return _key("crew_members", crew_id)

    # Google Places
    @staticmethod
    def places_predictions(query: str, options: str) -> str:
        return _key("places_predictions", query, options)

    @staticmethod
    def place_details(place_id: str) -> str:
        return _key("place_details", place_id)

    # Navigation
    @staticmethod
    def page_data(page_key: str, path: str) -> str:
        return _key("page_data", page_key, path)

    @staticmethod
    def navigation_state(path: str) -> str:
        return _key("nav_state", path)

    @staticmethod
    def prefixes() -> list[str]:
        """Known key prefixes, longest first so the most specific one matches."""
        return sorted(KEY_PREFIXES, key=len, reverse=True)


KEY_PREFIXES = (
    "user_profile_",
    "follow_counts_",
    "is_following_",
    "user_notifications_",
    "unread_count_",
    "my_events_",
    "accessible_events_",
    "event_detail_",
    "event_attendance_",
    "event_ratings_",
    "user_event_rating_",
    "discover_events_",
    "crew_details_",
    "crew_members_",
    "places_predictions_",
    "place_details_",
    "page_data_",
    "nav_state_",
)


class CacheTTL:
    """TTL tiers in seconds."""

    SHORT = 2 * 60
    MEDIUM = 5 * 60
    LONG = 15 * 60
    VERY_LONG = 60 * 60

    # Negative or failed lookups are retried sooner
    NEGATIVE_RESULT = 60
    NOTIFICATIONS = 60
