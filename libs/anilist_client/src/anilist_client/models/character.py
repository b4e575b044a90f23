from typing import List, Optional

from pydantic import BaseModel

from .media import FuzzyDate


class CharacterName(BaseModel):
    # SCALARS
    first: Optional[str] = None
    full: Optional[str] = None
    last: Optional[str] = None
    middle: Optional[str] = None
    native: Optional[str] = None
    userPreferred: Optional[str] = None
    # ARRAYS
    alternative: Optional[List[str]] = None
    alternativeSpoiler: Optional[List[str]] = None


class CharacterImage(BaseModel):
    # SCALARS
    large: Optional[str] = None
    medium: Optional[str] = None


class Character(BaseModel):
    # SCALARS
    age: Optional[str] = None
    bloodType: Optional[str] = None
    description: Optional[str] = None
    favourites: Optional[int] = None
    gender: Optional[str] = None
    id: int
    isFavourite: Optional[bool] = None
    isFavouriteBlocked: Optional[bool] = None
    siteUrl: Optional[str] = None
    # OBJECTS
    dateOfBirth: Optional[FuzzyDate] = None
    image: Optional[CharacterImage] = None
    name: Optional[CharacterName] = None
