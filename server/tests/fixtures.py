"""Reference values shared by the tests.

Expected hashes, elements and styles were produced by the identity service
that assigned the existing users, so they must never change.
"""

TEST_API_KEY = "secret"

TEST_HASHES = {
    "": 0,
    "a": 97,
    "u1": 3676,
    "abc123": 1424436592,
    "user-1": 836031825,
    "hello world": 1794106052,
    "ñandú": 225567348,
    "😀": 1772899,
    "user@@id!!": 999876102,
    "550e8400-e29b-41d4-a716-446655440000": 1716781005,
    "x" * 50: 237795072,
    # Wraps to -2**31, whose absolute value does not fit in 32 bits
    "polygenelubricants": 2147483648,
}

# user id -> (element, style id, avatar seed)
TEST_ASSIGNMENTS = {
    "a": ("water", "water_rain", "water-a"),
    "u1": ("earth", "earth_terracotta", "earth-u1"),
    "abc123": ("earth", "earth_terracotta", "earth-abc123"),
    "user-1": ("water", "water_ocean", "water-user-1"),
    "hello world": ("earth", "earth_terracotta", "earth-hello-world"),
    "ñandú": ("earth", "earth_terracotta", "earth--and-"),
    "😀": ("air", "air_storm", "air---"),
    "user@@id!!": ("fire", "fire_flame", "fire-user--id--"),
    "550e8400-e29b-41d4-a716-446655440000": (
        "water",
        "water_rain",
        "water-550e8400-e29b-41d4-a716-446655440000",
    ),
}

TEST_AVATAR_BASE_URL = "https://api.dicebear.com/7.x/avataaars/svg"

TEST_ELEMENTS = ["earth", "water", "fire", "air"]

TEST_STYLE_IDS = {
    "earth": ["earth_terracotta", "earth_forest", "earth_sand", "earth_clay"],
    "water": ["water_ocean", "water_ice", "water_rain", "water_spring"],
    "fire": ["fire_ember", "fire_sunset", "fire_flame", "fire_volcano"],
    "air": ["air_sky", "air_wind", "air_dawn", "air_storm"],
}
