import json
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _json_default(value: Any) -> Any:
    # amounts go out as JSON numbers, shortest float text
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class ProviderModel(BaseModel):
    """
    Base for everything decoded from the Edenred API.

    The portal sends `null` for any field it has no value for, so a null is
    read the same as a missing key and the field keeps its default.
    """

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class LoginRequest(BaseModel):
    userId: str
    password: str

    def to_json_bytes(self) -> bytes:
        # plain json.dumps never HTML-escapes <, > or &
        return json.dumps(self.model_dump(), ensure_ascii=False).encode("utf-8")


class Customer(ProviderModel):
    id: int | None = None
    regVersion: int | None = None
    name: str | None = None
    birthDate: str | None = None
    cellPhoneNumber: str | None = None
    workPostalCode: int | None = None
    residencePostalCode: int | None = None
    gender: str | None = None
    emailStatus: str | None = None
    workPlace: str | None = None
    residencePlace: str | None = None
    registerStatus: str | None = None
    latCoordinateWork: float | None = None
    lngCoordinateWork: float | None = None
    latCoordinateResidence: float | None = None
    lngCoordinateResidence: float | None = None
    passwordStatus: str | None = None
    email: str | None = None


class LoginData(ProviderModel):
    token: str = ""
    onBoardApplied: bool = False
    customer: Customer | None = None


class LoginResponse(ProviderModel):
    data: LoginData = Field(default_factory=LoginData)
    message: list[Any] = Field(default_factory=list)


class Account(ProviderModel):
    iban: str | None = None
    cardNumber: str = ""
    availableBalance: Decimal = Decimal("0")
    cardHolderFirstName: str = ""
    cardHolderLastName: str = ""
    cardActivated: bool = False


class Category(ProviderModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    description: str = ""


class Movement(ProviderModel):
    model_config = ConfigDict(frozen=True)

    transactionDate: str = ""
    transactionType: int | None = None
    transactionName: str = ""
    amount: Decimal = Decimal("0")
    mcc: str | None = None
    category: Category = Field(default_factory=Category)
    categoryId: int | None = None
    balance: Decimal = Decimal("0")

    def to_json_line(self) -> str:
        return json.dumps(self.model_dump(), ensure_ascii=False, default=_json_default)


class AccountMovementData(ProviderModel):
    account: Account = Field(default_factory=Account)
    movementList: list[Movement] = Field(default_factory=list)


class AccountMovementResponse(ProviderModel):
    data: AccountMovementData = Field(default_factory=AccountMovementData)
    message: list[Any] = Field(default_factory=list)
