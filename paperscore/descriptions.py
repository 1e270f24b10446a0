"""Names of fielding positions and field locations used in play descriptions."""

_POSITIONS = {
    1: "pitcher",
    2: "catcher",
    3: "first base",
    4: "second base",
    5: "third base",
    6: "shortstop",
    7: "left fielder",
    8: "center fielder",
    9: "right fielder",
}

_LOCATIONS = {
    1: "the circle",
    2: "home plate",
    3: "first base",
    4: "second base",
    5: "third base",
    6: "5-6 hole",
    7: "left field",
    8: "center field",
    9: "right field",
}


def position_name(fielder: int) -> str:
    """The name of the player at fielding position ``fielder``."""
    return _POSITIONS.get(fielder, f"unknown fielder {fielder}")


def location_name(fielder: int) -> str:
    """The area of the field covered by position ``fielder``."""
    return _LOCATIONS.get(fielder, f"unknown location {fielder}")