"""
The building blocks every service's models are written with, plus the records shared by
all resource manager services (Resource, ProxyResource, TrackedResource, SystemData and
the error envelope).

Conventions:
- Python attribute names are snake_case, the JSON name is the alias. Either can be used
  to construct a model.
- Optional fields default to None and None is never written to JSON.
- Embedded base records are declared with flattened(), which means their keys live
  directly in the enclosing JSON object rather than in a nested object.
- Server-defined enumerations are declared as OpenEnum[SomeEnum], which accepts values
  that aren't (yet) members of SomeEnum and keeps them as plain strings.
"""

from __future__ import annotations

import datetime
import enum
import functools
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

import pydantic
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from typing_extensions import Annotated


_FLATTEN = "flatten"


def flattened(model_type: Type[AzureModel]) -> Any:
    """
    Declares a field holding an embedded record whose JSON keys are spread into the
    enclosing object, e.g. `resource: Resource = flattened(Resource)`
    """
    return Field(default_factory=model_type, json_schema_extra={_FLATTEN: True})


class AzureModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def _flattened_fields(cls) -> List[Tuple[str, Type[AzureModel]]]:
        return _flattened_fields(cls)

    @classmethod
    def _json_keys(cls) -> FrozenSet[str]:
        return _json_keys(cls)

    @model_validator(mode="before")
    @classmethod
    def _gather_flattened(cls, data: Any) -> Any:
        flattened_fields = cls._flattened_fields()
        if not flattened_fields or not isinstance(data, Mapping):
            return data

        own_keys = _own_keys(cls)
        data = dict(data)
        for name, model_type in flattened_fields:
            # the embedded record was passed explicitly, e.g.
            # AddressResource(tracked_resource=TrackedResource(...))
            if name in data:
                continue
            data[name] = {
                key: data.pop(key)
                for key in model_type._json_keys()
                if key in data and key not in own_keys
            }
        return data

    @model_serializer(mode="wrap")
    def _spread_flattened(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data

        for name, _ in self._flattened_fields():
            field = type(self).model_fields[name]
            embedded = None
            for key in (name, field.alias):
                if key is not None and key in data:
                    embedded = data.pop(key)
            if isinstance(embedded, dict):
                # embedded keys come first, the same order as the schema
                data = {**embedded, **data}
        return data


@functools.lru_cache(maxsize=None)
def _flattened_fields(
    model_type: Type[AzureModel],
) -> List[Tuple[str, Type[AzureModel]]]:
    result = []
    for name, field in model_type.model_fields.items():
        extra = field.json_schema_extra
        if isinstance(extra, dict) and extra.get(_FLATTEN):
            result.append((name, field.annotation))
    return result


@functools.lru_cache(maxsize=None)
def _own_keys(model_type: Type[AzureModel]) -> FrozenSet[str]:
    keys = set()
    for name, field in model_type.model_fields.items():
        keys.add(name)
        if field.alias is not None:
            keys.add(field.alias)
    return frozenset(keys)


@functools.lru_cache(maxsize=None)
def _json_keys(model_type: Type[AzureModel]) -> FrozenSet[str]:
    """
    All of the keys (python names and aliases) that belong to this model when it is
    embedded in another object, including the keys of records it embeds itself
    """
    keys = set()
    flattened_names = set()
    for name, embedded_type in _flattened_fields(model_type):
        flattened_names.add(name)
        keys.update(_json_keys(embedded_type))
    for name, field in model_type.model_fields.items():
        if name in flattened_names:
            continue
        keys.add(name)
        if field.alias is not None:
            keys.add(field.alias)
    return frozenset(keys)


# open enumerations


E = TypeVar("E", bound=enum.Enum)


def _open_enum_validator(enum_type: Type[E]) -> Callable[[Any], Union[E, str]]:
    def validate(value: Any) -> Union[E, str]:
        if isinstance(value, enum_type):
            return value
        if not isinstance(value, str):
            raise ValueError(
                f"Expected a string for {enum_type.__name__}, got {type(value)}"
            )
        try:
            return enum_type(value)
        except ValueError:
            # not a value we know about, keep it as is so it round trips
            return value

    return validate


def _open_enum_serializer(value: Union[enum.Enum, str]) -> str:
    if isinstance(value, enum.Enum):
        return value.value
    return value


class OpenEnum:
    """
    OpenEnum[SomeEnum] is the annotation for a server-defined enumeration. Known values
    decode to the SomeEnum member (matching is exact and case sensitive), anything else
    is kept as the original string. SomeEnum should be a (str, enum.Enum).
    """

    def __class_getitem__(cls, enum_type: Type[E]) -> Any:
        return Annotated[
            Union[enum_type, str],
            PlainValidator(_open_enum_validator(enum_type)),
            PlainSerializer(_open_enum_serializer, return_type=str),
        ]


# polymorphic payloads


def polymorphic(
    discriminator: str,
    subtypes: Mapping[str, Type[AzureModel]],
    base_type: Type[AzureModel],
) -> Any:
    """
    An annotation for a field whose JSON object is one of several records depending on
    the string in its discriminator key. Unknown discriminator values decode as
    base_type.
    """

    def validate(value: Any) -> AzureModel:
        if isinstance(value, base_type) or any(
            isinstance(value, subtype) for subtype in subtypes.values()
        ):
            return value
        if not isinstance(value, Mapping):
            raise ValueError(f"Expected an object for {base_type.__name__}")
        return subtypes.get(value.get(discriminator), base_type).model_validate(value)

    def serialize(value: AzureModel) -> Dict[str, Any]:
        return encode(value)

    return Annotated[
        Union[tuple(subtypes.values()) + (base_type,)],
        PlainValidator(validate),
        PlainSerializer(serialize),
    ]


# encoding and decoding


def encode(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


@functools.lru_cache(maxsize=None)
def _type_adapter(type_: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(type_)


def decode(type_: Any, data: Any) -> Any:
    """
    type_ can be a model class or any other type pydantic understands, e.g.
    List[ReservationResponse]. Raises pydantic.ValidationError.
    """
    if isinstance(type_, type) and issubclass(type_, BaseModel):
        return type_.model_validate(data)
    return _type_adapter(type_).validate_python(data)


# records shared by all resource manager services


class CreatedByType(str, enum.Enum):
    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


class SystemData(AzureModel):
    """Metadata pertaining to creation and last modification of the resource."""

    created_by: Optional[str] = Field(None, alias="createdBy")
    created_by_type: Optional[OpenEnum[CreatedByType]] = Field(
        None, alias="createdByType"
    )
    created_at: Optional[datetime.datetime] = Field(None, alias="createdAt")
    last_modified_by: Optional[str] = Field(None, alias="lastModifiedBy")
    last_modified_by_type: Optional[OpenEnum[CreatedByType]] = Field(
        None, alias="lastModifiedByType"
    )
    last_modified_at: Optional[datetime.datetime] = Field(None, alias="lastModifiedAt")


class Resource(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")


class ProxyResource(AzureModel):
    resource: Resource = flattened(Resource)


class TrackedResource(AzureModel):
    resource: Resource = flattened(Resource)
    tags: Optional[Dict[str, Any]] = None
    location: str


class ErrorAdditionalInfo(AzureModel):
    type_: Optional[str] = Field(None, alias="type")
    info: Optional[Any] = None


class ErrorDetail(AzureModel):
    code: Optional[str] = None
    message: Optional[str] = None
    target: Optional[str] = None
    details: Optional[List[ErrorDetail]] = None
    additional_info: Optional[List[ErrorAdditionalInfo]] = Field(
        None, alias="additionalInfo"
    )


class ErrorResponse(AzureModel):
    error: Optional[ErrorDetail] = None


class OperationDisplay(AzureModel):
    provider: Optional[str] = None
    resource: Optional[str] = None
    operation: Optional[str] = None
    description: Optional[str] = None


class Operation(AzureModel):
    """An operation the resource provider supports, as returned by /operations"""

    name: Optional[str] = None
    is_data_action: Optional[bool] = Field(None, alias="isDataAction")
    display: Optional[OperationDisplay] = None
    origin: Optional[str] = None
    action_type: Optional[str] = Field(None, alias="actionType")


class OperationListResult(AzureModel):
    value: Optional[List[Operation]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")
