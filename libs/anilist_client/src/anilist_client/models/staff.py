from typing import List, Optional

from pydantic import BaseModel

from .media import FuzzyDate


class StaffName(BaseModel):
    # SCALARS
    first: Optional[str] = None
    full: Optional[str] = None
    last: Optional[str] = None
    middle: Optional[str] = None
    native: Optional[str] = None
    userPreferred: Optional[str] = None
    # ARRAYS
    alternative: Optional[List[str]] = None


class StaffImage(BaseModel):
    # SCALARS
    large: Optional[str] = None
    medium: Optional[str] = None


class Staff(BaseModel):
    # SCALARS
    age: Optional[int] = None
    bloodType: Optional[str] = None
    description: Optional[str] = None
    favourites: Optional[int] = None
    gender: Optional[str] = None
    homeTown: Optional[str] = None
    id: int
    isFavourite: Optional[bool] = None
    isFavouriteBlocked: Optional[bool] = None
    languageV2: Optional[str] = None
    siteUrl: Optional[str] = None
    # ARRAYS
    primaryOccupations: Optional[List[str]] = None
    yearsActive: Optional[List[int]] = None
    # OBJECTS
    dateOfBirth: Optional[FuzzyDate] = None
    dateOfDeath: Optional[FuzzyDate] = None
    image: Optional[StaffImage] = None
    name: Optional[StaffName] = None
