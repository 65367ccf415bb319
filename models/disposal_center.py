"""Data models for geographic points and disposal centers."""
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Optional, Sequence, Tuple, Union
from core.errors import ValidationError
from core.validation import require_latitude, require_longitude, require_non_blank, require_rating

ACCEPTS_ALL = "all"


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __post_init__(self):
        object.__setattr__(self, "latitude", require_latitude(self.latitude))
        object.__setattr__(self, "longitude", require_longitude(self.longitude))

    @classmethod
    def coerce(cls, value: Union["GeoPoint", Sequence[float], None]) -> Optional["GeoPoint"]:
        """Accept a GeoPoint, a (lat, lon) pair, or None."""
        if value is None or isinstance(value, GeoPoint):
            return value
        if isinstance(value, str):
            raise ValidationError(f"must be a (latitude, longitude) pair, got {value!r}", "origin")
        try:
            latitude, longitude = value
        except (TypeError, ValueError):
            raise ValidationError(f"must be a (latitude, longitude) pair, got {value!r}", "origin")
        return cls(latitude, longitude)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class DisposalCenter:
    id: str
    name: str
    address: str
    location: GeoPoint
    accepted_waste_types: FrozenSet[str]
    hours: str = ""
    rating: float = 0.0

    def __post_init__(self):
        require_non_blank(self.id, "id")
        object.__setattr__(self, "rating", require_rating(self.rating))
        object.__setattr__(
            self,
            "accepted_waste_types",
            frozenset(t.strip().lower() for t in self.accepted_waste_types if t and t.strip()),
        )

    @classmethod
    def create(cls, id: str, name: str, address: str, latitude: float, longitude: float,
               accepted_waste_types: Iterable[str], hours: str = "", rating: float = 0.0) -> "DisposalCenter":
        return cls(
            id=str(id),
            name=name,
            address=address,
            location=GeoPoint(latitude, longitude),
            accepted_waste_types=frozenset(accepted_waste_types),
            hours=hours,
            rating=rating,
        )

    def accepts(self, waste_type_key: str) -> bool:
        return waste_type_key in self.accepted_waste_types or ACCEPTS_ALL in self.accepted_waste_types

    @property
    def google_maps_url(self) -> str:
        return "https://maps.google.com/search/" + self.address.replace(" ", "+")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "acceptedWaste": sorted(self.accepted_waste_types),
            "hours": self.hours,
            "rating": self.rating,
            "googleMapsUrl": self.google_maps_url,
        }


@dataclass(frozen=True)
class CenterMatch:
    center: DisposalCenter
    distance_km: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = self.center.to_dict()
        data["distance"] = self.distance_km
        return data
