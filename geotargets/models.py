from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationType(str, Enum):
    """
    Target types found in the dataset.

    Each member carries the label used in the dataset, whether rows of that
    type are kept, and the output bucket they are grouped into.
    """

    CITY = ("City", True, "cities")
    COUNTRY = ("Country", True, "countries")
    COUNTY = ("County", True, "counties")
    POSTAL_CODE = ("Postal Code", True, "postal_codes")
    REGION = ("Region", True, "regions")
    STATE = ("State", True, "states")
    TERRITORY = ("Territory", False, None)

    def __new__(cls, label: str, included: bool, bucket: Optional[str]):
        obj = str.__new__(cls, label)
        obj._value_ = label
        obj.included = included
        obj.bucket = bucket
        return obj

    @classmethod
    def from_label(cls, label: str) -> Optional["LocationType"]:
        try:
            return cls(label)
        except ValueError:
            return None

    @classmethod
    def included_types(cls) -> List["LocationType"]:
        return [member for member in cls if member.included]

    @classmethod
    def from_bucket(cls, bucket: str) -> Optional["LocationType"]:
        for member in cls.included_types():
            if member.bucket == bucket:
                return member
        return None


class LocationCanonical(BaseModel):
    model_config = ConfigDict(frozen=True)

    region: Optional[str] = None
    country: str


class LocationEntity(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(gt=0)
    name: str
    canonical: str
    region: Optional[str] = None
    country: str
    country_code: str = Field(alias="countryCode")
    type: LocationType

    def to_output(self) -> Dict[str, Any]:
        """
        Serializable form for bucket files: `type` is implied by the bucket
        and an absent region is left out.
        """
        return self.model_dump(by_alias=True, exclude={"type"}, exclude_none=True)


class EntitiesResponse(BaseModel):
    counts: Dict[str, int] = Field(default_factory=dict)
    total: int = 0
    buckets: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
