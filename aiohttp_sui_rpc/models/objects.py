from typing import Any, Dict, Optional, Union

from pydantic import Field

from .base import BigInt, Page, SuiModel

# "Immutable" or {"AddressOwner": ...}, {"ObjectOwner": ...},
# {"Shared": {"initial_shared_version": ...}}
Owner = Union[str, Dict[str, Any]]


class ObjectDataOptions(SuiModel):
    show_type: bool = False
    show_owner: bool = False
    show_previous_transaction: bool = False
    show_display: bool = False
    show_content: bool = False
    show_bcs: bool = False
    show_storage_rebate: bool = False

    @classmethod
    def full(cls):
        return cls(**{name: True for name in cls.model_fields})


class SuiObjectRef(SuiModel):
    object_id: str
    version: int
    digest: str


class OwnedObjectRef(SuiModel):
    owner: Owner
    reference: SuiObjectRef


class SuiObjectData(SuiModel):
    object_id: str
    version: BigInt
    digest: str
    object_type: Optional[str] = Field(default=None, alias='type')
    owner: Optional[Owner] = None
    previous_transaction: Optional[str] = None
    storage_rebate: Optional[BigInt] = None
    display: Optional[Dict[str, Any]] = None
    content: Optional[Dict[str, Any]] = None
    bcs: Optional[Dict[str, Any]] = None

    def object_ref(self):
        return SuiObjectRef(object_id=self.object_id, version=self.version,
                            digest=self.digest)


class SuiObjectResponse(SuiModel):
    data: Optional[SuiObjectData] = None
    error: Optional[Dict[str, Any]] = None


class ObjectResponseQuery(SuiModel):
    filter: Optional[Dict[str, Any]] = None
    options: Optional[ObjectDataOptions] = None


class PastObjectResponse(SuiModel):
    """Result of ``sui_tryGetPastObject``.

    ``status`` is one of ``VersionFound``, ``ObjectNotExists``,
    ``ObjectDeleted``, ``VersionNotFound`` or ``VersionTooHigh``; the
    shape of ``details`` depends on it.
    """

    status: str
    details: Any = None

    @property
    def found(self):
        return self.status == 'VersionFound'

    def object_data(self):
        if not self.found:
            return None

        return SuiObjectData.from_json(self.details)


class Balance(SuiModel):
    coin_type: str
    coin_object_count: int
    total_balance: BigInt
    locked_balance: Dict[str, BigInt] = Field(default_factory=dict)


class CoinStruct(SuiModel):
    coin_type: str
    coin_object_id: str
    version: BigInt
    digest: str
    balance: BigInt
    previous_transaction: str
    locked_until_epoch: Optional[BigInt] = None


class CoinMetadata(SuiModel):
    decimals: int
    name: str
    symbol: str
    description: str
    icon_url: Optional[str] = None
    id: Optional[str] = None


PaginatedObjectsResponse = Page[SuiObjectResponse, str]
PaginatedCoins = Page[CoinStruct, str]
