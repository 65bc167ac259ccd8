from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Ids are unsigned 64-bit on disk.
_MAX_ID = 2**64 - 1


class Eatery(BaseModel):
    """
    One eatery as stored on disk, reviews included.

    Scalar fields are strict: a rating written as "4.5" or an id written as
    "3" is rejected rather than coerced, and so is a non-finite rating.
    Unknown keys are ignored. List fields are held as tuples so a loaded
    eatery cannot be changed in place.
    """

    model_config = ConfigDict(frozen=True)

    id: StrictInt = Field(ge=0, le=_MAX_ID)
    name: StrictStr
    category: tuple[StrictStr, ...]
    open_time: StrictStr  # free-form, e.g. "7:00 AM"
    close_time: StrictStr
    rating: float = Field(strict=True, allow_inf_nan=False)
    photo: StrictStr
    address: StrictStr
    phone_number: StrictStr
    reviews: tuple[StrictStr, ...]


class EaterySummary(BaseModel):
    # Listing/search shape: everything but reviews.
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    category: tuple[str, ...]
    open_time: str
    close_time: str
    rating: float
    photo: str
    address: str
    phone_number: str


def summarize(eatery: Eatery) -> EaterySummary:
    return EaterySummary(
        id=eatery.id,
        name=eatery.name,
        category=eatery.category,
        open_time=eatery.open_time,
        close_time=eatery.close_time,
        rating=eatery.rating,
        photo=eatery.photo,
        address=eatery.address,
        phone_number=eatery.phone_number,
    )


class EateryList(BaseModel):
    restaurants: list[EaterySummary]


class EateryRequest(BaseModel):
    id: int = Field(ge=0, le=_MAX_ID)


class CatalogHealth(BaseModel):
    status: str = "ok"
    eateries: int
    dropped: int
