"""JSON encoding of request bodies and decoding of typed responses."""

import json
from typing import Any, List, Mapping, Union, get_args, get_origin

from ..utils.errors import ResponseDecodeError


class JsonCodec:
    """Convert between key-value mappings, JSON payloads and typed records.

    A response type is either a record class exposing ``from_api_response``
    or ``List[<record class>]`` for endpoints that return a JSON array.
    """

    def to_json(self, value: Mapping[str, Any]) -> bytes:
        """Encode a mapping as a UTF-8 JSON payload."""
        return json.dumps(value, ensure_ascii=False).encode("utf-8")

    def loads(self, payload: Union[bytes, str]) -> Any:
        """Parse a JSON payload."""
        try:
            return json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResponseDecodeError(f"Invalid JSON response: {e}")

    def from_json(self, payload: Union[bytes, str], response_type: Any) -> Any:
        """
        Decode a JSON payload into the given response type.

        Args:
            payload: Raw response body
            response_type: Record class or ``List[record class]``

        Returns:
            Decoded record or list of records
        """
        return self.decode(self.loads(payload), response_type)

    def decode(self, data: Any, response_type: Any) -> Any:
        """Build typed records from already-parsed JSON."""
        if get_origin(response_type) in (list, List):
            (item_type,) = get_args(response_type)
            if not isinstance(data, list):
                raise ResponseDecodeError(
                    f"Expected a JSON array, got {type(data).__name__}"
                )
            return [item_type.from_api_response(item) for item in data]
        return response_type.from_api_response(data)
