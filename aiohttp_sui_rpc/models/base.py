from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

T = TypeVar('T')
C = TypeVar('C')

# u64/u128 values travel as decimal strings
BigInt = Annotated[int, PlainSerializer(str, return_type=str,
                                        when_used='json')]


class SuiModel(BaseModel):
    """Base class of all values exchanged with the node.

    Attribute names are snake_case, wire names camelCase. Fields the
    node sends but the model does not declare are kept, so a decoded
    value encodes back to the same document.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra='allow',
    )

    @classmethod
    def from_json(cls, data):
        return cls.model_validate(data)

    def to_json(self):
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


class Page(SuiModel, Generic[T, C]):
    """Paginated result envelope returned by the query methods."""

    data: List[T]
    next_cursor: Optional[C] = None
    has_next_page: bool = False
