"""
Serialization between models and the wire.

Queries are form-encoded with repeated keys for list values
(``where=Watched&where=Released``); bodies are compact JSON. Request model
fields that were never given, and ``None`` values in plain mappings, are
left out entirely so the server falls back to its own default. A model field
explicitly set to ``None`` is sent as JSON ``null``, e.g. to clear a rating.
"""

import json
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar, Union
from urllib.parse import urlencode

from pydantic import BaseModel, ValidationError

from .exceptions import DecodingError, EncodingError

ModelT = TypeVar('ModelT', bound=BaseModel)

Payload = Union[BaseModel, Mapping[str, Any]]


def _to_dict(payload: Payload) -> dict:
    """Dump a model (or mapping) to wire-named JSON-compatible values."""
    if isinstance(payload, BaseModel):
        try:
            return payload.model_dump(mode='json', by_alias=True)
        except ValueError as e:
            raise EncodingError(f"cannot serialize {type(payload).__name__}: {e}") from e
    return {key: value for key, value in payload.items() if value is not None}


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (dict, list)):
        raise EncodingError(f"unsupported nested query value: {value!r}")
    return str(value)


def encode_query(query: Optional[Union[Payload, str]]) -> str:
    """
    Form-encode a request model as a query string.

    A string is taken as already encoded and returned unchanged.
    """
    if query is None:
        return ""
    if isinstance(query, str):
        return query

    pairs: List[Tuple[str, str]] = []
    for key, value in _to_dict(query).items():
        if value is None:
            continue
        if isinstance(value, list):
            pairs.extend((key, _query_value(item)) for item in value)
        else:
            pairs.append((key, _query_value(value)))

    try:
        return urlencode(pairs)
    except UnicodeEncodeError as e:
        raise EncodingError(f"cannot encode query: {e}") from e


def encode_body(body: Optional[Payload]) -> str:
    """Serialize a request model as compact JSON, or "" for no body."""
    if body is None:
        return ""
    try:
        return json.dumps(_to_dict(body), separators=(',', ':'), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"cannot serialize body: {e}") from e


def decode(model: Type[ModelT], data: bytes, url: Optional[str] = None) -> ModelT:
    """
    Decode a JSON response body into ``model``.

    Raises:
        DecodingError: If the body is not UTF-8, not JSON, or does not
            match the model
    """
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodingError(f"response is not valid UTF-8: {e}", url) from e

    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        raise DecodingError(f"cannot decode {model.__name__}: {e}", url) from e
