"""Named reference locations and free-form coordinates."""

from ._types import Location
from .errors import UnknownLocationError

# The 20 largest French cities.
CITIES: tuple[Location, ...] = (
    Location("Paris", 48.8566, 2.3522),
    Location("Marseille", 43.2965, 5.3698),
    Location("Lyon", 45.7640, 4.8357),
    Location("Toulouse", 43.6047, 1.4442),
    Location("Nice", 43.7102, 7.2620),
    Location("Nantes", 47.2184, -1.5536),
    Location("Strasbourg", 48.5734, 7.7521),
    Location("Montpellier", 43.6108, 3.8767),
    Location("Bordeaux", 44.8378, -0.5792),
    Location("Lille", 50.6292, 3.0573),
    Location("Rennes", 48.1173, -1.6778),
    Location("Reims", 49.2583, 4.0317),
    Location("Saint-Étienne", 45.4397, 4.3872),
    Location("Le Havre", 49.4944, 0.1079),
    Location("Toulon", 43.1242, 5.9280),
    Location("Grenoble", 45.1885, 5.7245),
    Location("Dijon", 47.3220, 5.0415),
    Location("Angers", 47.4784, -0.5632),
    Location("Nîmes", 43.8367, 4.3601),
    Location("Clermont-Ferrand", 45.7772, 3.0870),
)


def find_city(name: str) -> Location:
    """Look up a city by name (case-insensitive)."""
    wanted = name.strip().casefold()
    for city in CITIES:
        if city.name.casefold() == wanted:
            return city
    raise UnknownLocationError(f"Unknown city: {name!r}")


def coordinates_label(latitude: float, longitude: float) -> str:
    return f"{latitude:.4f}°N, {longitude:.4f}°E"


def coordinates_location(latitude: float, longitude: float = 0.0) -> Location:
    """Free-form location labelled with its own coordinates."""
    return Location(coordinates_label(latitude, longitude), latitude, longitude)
