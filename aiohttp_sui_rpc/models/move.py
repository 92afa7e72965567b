from typing import Any, Dict, List, Union

from pydantic import Field

from .base import SuiModel

# "Pure" or {"Object": "ByImmutableReference" | "ByMutableReference" |
# "ByValue"}
MoveFunctionArgType = Union[str, Dict[str, str]]

# type signatures are nested JSON ("U64", {"Vector": ...}, {"Struct": ...})
MoveType = Any


class MoveAbilitySet(SuiModel):
    abilities: List[str] = Field(default_factory=list)


class MoveModuleId(SuiModel):
    address: str
    name: str


class MoveStructTypeParameter(SuiModel):
    constraints: MoveAbilitySet
    is_phantom: bool = False


class MoveField(SuiModel):
    name: str
    field_type: MoveType = Field(alias='type')


class MoveNormalizedStruct(SuiModel):
    abilities: MoveAbilitySet
    type_parameters: List[MoveStructTypeParameter] = Field(
        default_factory=list)
    fields: List[MoveField] = Field(default_factory=list)


class MoveNormalizedFunction(SuiModel):
    visibility: str
    is_entry: bool = False
    type_parameters: List[MoveAbilitySet] = Field(default_factory=list)
    parameters: List[MoveType] = Field(default_factory=list)
    return_: List[MoveType] = Field(default_factory=list, alias='return')


class MoveNormalizedModule(SuiModel):
    file_format_version: int
    address: str
    name: str
    friends: List[MoveModuleId] = Field(default_factory=list)
    structs: Dict[str, MoveNormalizedStruct] = Field(default_factory=dict)
    exposed_functions: Dict[str, MoveNormalizedFunction] = Field(
        default_factory=dict)
